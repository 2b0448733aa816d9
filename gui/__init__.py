"""
gui - PySide6 Desktop Interface for File Kit
"""

from .gui_entry import main

__all__ = ["main"]
