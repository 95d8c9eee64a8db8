# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Top-level package initialization for Trash Move.

from .models.move_result import MoveResult
from .services.trash import move_paths_to_trash, reset_command_cache

__all__ = [
    "MoveResult",
    "__author__",
    "__version__",
    "move_paths_to_trash",
    "reset_command_cache",
]

__version__ = "0.1.0"
__author__ = "Rich Lewis"
