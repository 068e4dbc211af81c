"""Console application layer: the numbered menu entry point."""

from .menu import main, run_exercise, run_menu

__all__ = ["main", "run_exercise", "run_menu"]
