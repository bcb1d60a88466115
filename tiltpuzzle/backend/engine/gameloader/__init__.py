from tiltpuzzle.backend.engine.gameloader.loader import BoardFormatError, load_board, parse_board

__all__ = ["BoardFormatError", "load_board", "parse_board"]
