from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from database import Base


class Cell(Base):
    """One occupied square of a game board. Empty squares have no row."""

    __tablename__ = "cells"
    __table_args__ = (UniqueConstraint("game_id", "row", "col", name="uq_cells_game_square"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_id = Column(Integer, ForeignKey("games.id"), nullable=False, index=True)
    row = Column(Integer, nullable=False)
    col = Column(Integer, nullable=False)
    symbol = Column(String(1), nullable=False)  # "x" or "o"
