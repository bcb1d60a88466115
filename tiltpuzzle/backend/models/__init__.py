from tiltpuzzle.backend.models.board import Board, Direction, Piece
from tiltpuzzle.backend.models.clock import ClockConfig
from tiltpuzzle.backend.models.configuration import Configuration
from tiltpuzzle.backend.models.water import WaterConfig

__all__ = ["Board", "ClockConfig", "Configuration", "Direction", "Piece", "WaterConfig"]
