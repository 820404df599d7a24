from models.enums import GameStatus, Symbol

Board = list[list[Symbol]]

DEFAULT_BOARD_SIZE = 3

FINAL_STATUSES = (GameStatus.X_WINS, GameStatus.O_WINS, GameStatus.DRAW)


def initialize(size: int = DEFAULT_BOARD_SIZE) -> Board:
    """return an empty size x size board"""
    if size < 1:
        raise ValueError(f"Board size must be at least 1, got {size}")
    return [[Symbol.EMPTY for _ in range(size)] for _ in range(size)]


def is_move_valid(board: Board, row: int, col: int) -> bool:
    """inside the board and the square is still empty"""
    size = len(board)
    if row < 0 or row >= size or col < 0 or col >= size:
        return False
    return board[row][col] == Symbol.EMPTY


def _winner(total: int) -> GameStatus:
    return GameStatus.X_WINS if total > 0 else GameStatus.O_WINS


def compute_status(board: Board) -> GameStatus:
    """
    Status of the board on its own, one pass in row-major order.

    X counts +1 and O counts -1 on the running total of each row, column and
    diagonal the square sits on. A total reaching the board size is a
    completed line and ends the scan. Whether the second player has joined is
    not known here, so this never returns PENDING.
    """
    size = len(board)
    rows = [0] * size
    cols = [0] * size
    diag = 0
    anti_diag = 0
    moves_x = 0
    moves_o = 0

    for r, line in enumerate(board):
        for c, square in enumerate(line):
            if square == Symbol.EMPTY:
                continue
            if square == Symbol.X:
                moves_x += 1
                step = 1
            else:
                moves_o += 1
                step = -1

            rows[r] += step
            if abs(rows[r]) == size:
                return _winner(rows[r])
            cols[c] += step
            if abs(cols[c]) == size:
                return _winner(cols[c])
            if r == c:
                diag += step
                if abs(diag) == size:
                    return _winner(diag)
            if r + c == size - 1:
                anti_diag += step
                if abs(anti_diag) == size:
                    return _winner(anti_diag)

    if moves_x + moves_o == size * size:
        return GameStatus.DRAW
    if moves_x > moves_o:
        return GameStatus.O_NEXT
    return GameStatus.X_NEXT


def is_final(status: GameStatus) -> bool:
    return status in FINAL_STATUSES


def next_symbol(status: GameStatus) -> Symbol | None:
    """symbol expected to play next, None when nobody can move"""
    if status == GameStatus.X_NEXT:
        return Symbol.X
    if status == GameStatus.O_NEXT:
        return Symbol.O
    return None
