"""
gui - PySide6 Interface for ccpath
"""

from .gui_entry import main

__all__ = ["main"]
