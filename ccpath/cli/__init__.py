"""
cli - Command Line Interface for ccpath
"""

from .cli_entry import main

__all__ = ["main"]
