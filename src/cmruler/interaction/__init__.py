from .cursors import Cursor, CursorController

__all__ = ["Cursor", "CursorController"]
