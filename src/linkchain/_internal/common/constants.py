from enum import Enum, unique


@unique
class ComposeStrategy(str, Enum):
    RECURSIVE = "recursive"
    ITERATIVE = "iterative"
