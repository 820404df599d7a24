class GameError(Exception):
    """Base error for every failure the API reports to a caller."""

    kind = "error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.kind, "message": self.message}


class NotFoundError(GameError):
    kind = "not_found"
    status_code = 404


class ForbiddenError(GameError):
    kind = "forbidden"
    status_code = 403


class GameNotVisibleError(ForbiddenError):
    # reported exactly like a missing game so outsiders cannot probe codes
    kind = NotFoundError.kind
    status_code = NotFoundError.status_code


class ConflictError(GameError):
    kind = "conflict"
    status_code = 409


class InvalidArgumentError(GameError):
    kind = "invalid_argument"
    status_code = 400


class InternalError(GameError):
    kind = "internal"
    status_code = 500


class DuplicateCodeError(Exception):
    """A game with the same short code already exists."""


class StaleGameError(Exception):
    """The game changed between the read and the write of a move."""
