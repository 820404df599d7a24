from flask import Blueprint, request, jsonify
from database import SessionLocal
from services.errors import GameError, InvalidArgumentError
from services.game_service import GameService
from services.user_service import UserService

router = Blueprint('game_controller', __name__)


@router.errorhandler(GameError)
def handle_game_error(error: GameError):
    return jsonify(error.to_dict()), error.status_code


def _require_user_id(value):
    if not value:
        raise InvalidArgumentError("user_id is required")
    return str(value)


def _require_int(data: dict, key: str, default=None) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{key} must be an integer")
    return value


@router.route("/user", methods=["POST"])
def create_user():
    db = SessionLocal()
    try:
        user = UserService(db).create_user()
    finally:
        db.close()
    return jsonify(user), 201


@router.route("/game", methods=["POST"])
def create_game():
    db = SessionLocal()
    data = request.get_json(silent=True) or {}
    try:
        user_id = _require_user_id(data.get("user_id"))
        board_size = _require_int(data, "board_size", default=3)
        game = GameService(db).create_game(user_id, board_size)
    finally:
        db.close()
    return jsonify(game), 201


@router.route("/game/<code>", methods=["GET"])
def get_game(code):
    db = SessionLocal()
    try:
        user_id = _require_user_id(request.args.get("user_id"))
        game = GameService(db).get_game(code, user_id)
    finally:
        db.close()
    return jsonify(game)


@router.route("/game/<code>/join", methods=["POST"])
def join_game(code):
    db = SessionLocal()
    data = request.get_json(silent=True) or {}
    try:
        user_id = _require_user_id(data.get("user_id"))
        game = GameService(db).join_game(user_id, code)
    finally:
        db.close()
    return jsonify(game)


@router.route("/game/<code>/move", methods=["POST"])
def make_move(code):
    db = SessionLocal()
    data = request.get_json(silent=True) or {}
    try:
        user_id = _require_user_id(data.get("user_id"))
        row = _require_int(data, "row")
        col = _require_int(data, "col")
        game = GameService(db).make_move(user_id, code, row, col)
    finally:
        db.close()
    return jsonify(game)
