from enum import Enum

class Symbol(str, Enum):
    X = "x"
    O = "o"
    EMPTY = "_"

class GameStatus(str, Enum):
    PENDING = "PENDING"
    X_NEXT = "X_NEXT"
    O_NEXT = "O_NEXT"
    X_WINS = "X_WINS"
    O_WINS = "O_WINS"
    DRAW = "DRAW"
