"""Task manager with simple and timed tasks, plain-text file storage and a console menu."""

__version__ = "1.0.0"
__all__ = ["task", "manager", "console"]