from . import SamplePuzzle, register_puzzle

@register_puzzle
class VeryEasy(SamplePuzzle):
    name = "very-easy"
    description = "A very easy puzzle, modified so the top row is blank"
    source = "https://www.sudokukingdom.com/very-easy-sudoku.php"
    rows = (
        "000000000",
        "428000107",
        "003186002",
        "900600208",
        "000000000",
        "260058004",
        "010207340",
        "309015000",
        "070090581",
    )
