from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from models.cell import Cell
from models.enums import Symbol
from models.game import Game
from services.board_logic import Board, initialize
from services.errors import DuplicateCodeError, NotFoundError, StaleGameError


class GameStore:
    """Persistence of games and their board squares."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_code_or_none(self, code: str) -> Game | None:
        return self.db.query(Game).filter(Game.code == code).first()

    def find_by_code(self, code: str) -> Game:
        game = self.find_by_code_or_none(code)
        if not game:
            raise NotFoundError(f"No game with code {code} found.")
        return game

    def insert(self, game: Game) -> Game:
        code = game.code
        self.db.add(game)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.find_by_code_or_none(code) is not None:
                raise DuplicateCodeError(code)
            raise
        self.db.refresh(game)
        return game

    def load_board(self, game: Game) -> Board:
        board = initialize(game.size)
        for cell in self.db.query(Cell).filter(Cell.game_id == game.id).all():
            board[cell.row][cell.col] = Symbol(cell.symbol)
        return board

    def place_symbol(self, game: Game, row: int, col: int, symbol: Symbol) -> None:
        """
        Write a single square, only if no other move landed since `game` was read.

        The version bump and the square insert share one transaction, and the
        unique (game_id, row, col) constraint rejects a second write to the
        same square.
        """
        expected = game.move_count
        result = self.db.execute(
            update(Game)
            .where(Game.id == game.id, Game.move_count == expected)
            .values(move_count=Game.move_count + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            self.db.rollback()
            raise StaleGameError(game.code)

        self.db.add(Cell(game_id=game.id, row=row, col=col, symbol=symbol.value))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise StaleGameError(game.code)

    def assign_second_player(self, game: Game, user_id: str) -> bool:
        """set O only if still unset, returns whether this call set it"""
        result = self.db.execute(
            update(Game)
            .where(Game.id == game.id, Game.o_user_id.is_(None))
            .values(o_user_id=user_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            self.db.rollback()
            return False
        self.db.commit()
        return True
