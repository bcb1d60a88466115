from tiltpuzzle.backend.engine.gameplay.game import ILLEGAL_MOVE, TiltGame

__all__ = ["ILLEGAL_MOVE", "TiltGame"]
