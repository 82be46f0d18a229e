from .module import ChessModule  # noqa: F401
