from . import SamplePuzzle, register_puzzle

@register_puzzle
class Extreme(SamplePuzzle):
    name = "extreme"
    description = "An extremely difficult puzzle"
    source = "https://www.extremesudoku.info/sudoku.html"
    rows = (
        "604005908",
        "070080040",
        "000000000",
        "009000006",
        "020040010",
        "300000500",
        "000000000",
        "030070020",
        "906400107",
    )
