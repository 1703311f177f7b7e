"""
ccpath - Convert file and directory names between naming conventions
"""

__version__ = "0.1.0"
