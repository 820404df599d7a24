import secrets

from services.board_logic import Board

GAME_CODE_BYTES = 4


def generate_game_code() -> str:
    """8 upper-case hex characters, easy to read out to a friend"""
    return secrets.token_hex(GAME_CODE_BYTES).upper()


def board_to_rows(board: Board) -> list[list[str]]:
    return [[square.value for square in line] for line in board]


def isoformat(value):
    return value.isoformat() if value else None
