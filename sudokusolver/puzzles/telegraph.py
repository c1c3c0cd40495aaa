from . import SamplePuzzle, register_puzzle

@register_puzzle
class Telegraph(SamplePuzzle):
    name = "telegraph"
    description = "The world's hardest sudoku according to the Telegraph"
    source = (
        "https://www.telegraph.co.uk/news/science/science-news/9359579/"
        "Worlds-hardest-sudoku-can-you-crack-it.html"
    )
    rows = (
        "800000000",
        "003600000",
        "070090200",
        "050007000",
        "000045700",
        "000100030",
        "001000068",
        "008500010",
        "090000400",
    )
