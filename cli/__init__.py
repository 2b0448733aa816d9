"""
cli - Command Line Interface for File Kit
"""

from .cli_entry import main, run, create_parser
from .cli_interactive import interactive_mode

__all__ = ["main", "run", "create_parser", "interactive_mode"]
