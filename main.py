#!/usr/bin/env python3
"""
File Kit - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui parameter)

Usage:
    python main.py                                 # Show help
    python main.py rename draft final ./docs       # CLI command mode
    python main.py replace foo bar ./src py --backup
    python main.py interactive                     # CLI interactive mode
    python main.py --gui                           # GUI mode
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    if "--gui" in sys.argv:
        try:
            from gui import main as gui_main
        except ImportError as e:
            print("Error: Unable to start GUI, please ensure PySide6 is installed", file=sys.stderr)
            print(f"Detailed error: {e}", file=sys.stderr)
            print("\nInstall command: pip install PySide6", file=sys.stderr)
            return 1
        return gui_main()

    from cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
