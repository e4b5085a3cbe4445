"""Point rotation routines."""

from .core import rotate_copies, rotate_point, rotate_points

__all__ = ["rotate_point", "rotate_points", "rotate_copies"]
