import logging
from typing import Callable

from sqlalchemy.orm import Session
from models.enums import GameStatus, Symbol
from models.game import Game
from services.board_logic import (
    DEFAULT_BOARD_SIZE,
    Board,
    compute_status,
    initialize,
    is_final,
    is_move_valid,
    next_symbol,
)
from services.errors import (
    ConflictError,
    DuplicateCodeError,
    ForbiddenError,
    GameNotVisibleError,
    InternalError,
    InvalidArgumentError,
    StaleGameError,
)
from services.game_store import GameStore
from services.user_service import UserService
from services.utils import board_to_rows, generate_game_code, isoformat

logger = logging.getLogger(__name__)

MAX_CODE_GENERATION_TRIES = 3
MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 10


class GameService:
    """Game lifecycle: create, join, move and per-player views."""

    def __init__(
        self,
        db: Session,
        store: GameStore | None = None,
        users: UserService | None = None,
        code_factory: Callable[[], str] = generate_game_code,
    ):
        self.db = db
        self.store = store or GameStore(db)
        self.users = users or UserService(db)
        self.code_factory = code_factory

    def create_game(self, creator_user_id: str, board_size: int = DEFAULT_BOARD_SIZE) -> dict:
        self.users.lookup_user(creator_user_id)
        if (
            isinstance(board_size, bool)
            or not isinstance(board_size, int)
            or not MIN_BOARD_SIZE <= board_size <= MAX_BOARD_SIZE
        ):
            raise InvalidArgumentError(
                f"Board size must be an integer between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}"
            )

        for attempt in range(1, MAX_CODE_GENERATION_TRIES + 1):
            game = Game(
                code=self.code_factory(),
                size=board_size,
                x_user_id=creator_user_id,
                move_count=0,
            )
            try:
                game = self.store.insert(game)
            except DuplicateCodeError as e:
                logger.warning("Game code %s already taken (attempt %d)", e, attempt)
                continue
            logger.info("User %s created game %s (%dx%d)", creator_user_id, game.code, board_size, board_size)
            return self.format_for_viewer(game, initialize(board_size), creator_user_id)

        logger.error("Unique game code generation failed after %d attempts", MAX_CODE_GENERATION_TRIES)
        raise InternalError("An error occurred. Please try again.")

    def get_game(self, game_code: str, viewer_user_id: str) -> dict:
        game = self.store.find_by_code(game_code)
        if viewer_user_id is None or viewer_user_id not in (game.x_user_id, game.o_user_id):
            raise GameNotVisibleError(f"No game with code {game_code} found.")
        return self.format_for_viewer(game, self.store.load_board(game), viewer_user_id)

    def join_game(self, joiner_user_id: str, game_code: str) -> dict:
        game = self.store.find_by_code(game_code)
        self.users.lookup_user(joiner_user_id)

        if game.x_user_id != joiner_user_id and game.o_user_id is None:
            if self.store.assign_second_player(game, joiner_user_id):
                logger.info("User %s joined game %s as O", joiner_user_id, game_code)
            # someone may have joined in between, re-read and check again
            game = self.store.find_by_code(game_code)

        if joiner_user_id not in (game.x_user_id, game.o_user_id):
            raise ConflictError("Game is already full")
        return self.format_for_viewer(game, self.store.load_board(game), joiner_user_id)

    def make_move(self, user_id: str, game_code: str, row: int, col: int) -> dict:
        game = self.store.find_by_code(game_code)
        self.users.lookup_user(user_id)

        symbol = self._symbol_for(game, user_id)
        board = self.store.load_board(game)
        status = compute_status(board)
        if is_final(status):
            raise ConflictError("Game is over; cannot make a move")
        expected = next_symbol(status)
        if symbol != expected:
            logger.warning("Out of turn move by %s in game %s", user_id, game_code)
            raise ConflictError(f"Out of turn; expected {expected.name}")
        if not is_move_valid(board, row, col):
            logger.warning("Invalid move (%s, %s) by %s in game %s", row, col, user_id, game_code)
            raise InvalidArgumentError("Invalid move")

        try:
            self.store.place_symbol(game, row, col, symbol)
        except StaleGameError:
            raise ConflictError("Game was updated by another move; please retry")
        logger.info("Game %s: %s played (%d, %d)", game_code, symbol.name, row, col)

        updated = self.store.find_by_code(game_code)
        return self.format_for_viewer(updated, self.store.load_board(updated), user_id)

    def _symbol_for(self, game: Game, user_id: str) -> Symbol:
        if game.x_user_id == user_id:
            return Symbol.X
        if game.o_user_id is not None and game.o_user_id == user_id:
            return Symbol.O
        raise ForbiddenError("User is not participating in this game")

    def format_for_viewer(self, game: Game, board: Board, viewer_user_id: str) -> dict:
        """
        Project a game for one participant.

        The status becomes PENDING until O has joined, and only the viewer's
        own participant id is included: O sees `o_user_id`, X sees
        `x_user_id`. Anyone else is refused.
        """
        status = GameStatus.PENDING if game.o_user_id is None else compute_status(board)
        view = {
            "code": game.code,
            "size": game.size,
            "board": board_to_rows(board),
            "status": status.value,
            "created_at": isoformat(game.created_at),
            "updated_at": isoformat(game.updated_at),
        }
        if game.o_user_id is not None and viewer_user_id == game.o_user_id:
            view["o_user_id"] = game.o_user_id
        elif viewer_user_id == game.x_user_id:
            view["x_user_id"] = game.x_user_id
        else:
            # callers check participation first, this only guards the boundary
            raise ForbiddenError("User is not participating in this game")
        return view
