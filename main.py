#!/usr/bin/env python3
"""
ccpath - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli parameter)

Usage:
    python main.py                              # GUI mode (default)
    python main.py --cli snake "Some File.txt"  # CLI mode
    python main.py --cli --dry-run -r kebab ./dir
"""

import sys


def main():
    """Main entry point"""
    if "--cli" in sys.argv:
        args = [arg for arg in sys.argv[1:] if arg != "--cli"]

        from ccpath.cli import main as cli_main
        return cli_main(args)

    # Default to starting GUI
    try:
        from ccpath.gui import main as gui_main
    except ImportError as e:
        print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install 'ccpath[gui]'")
        print("\nTo use CLI mode, run:")
        print("    python main.py --cli CONVENTION PATH...")
        print("or  ccpath CONVENTION PATH...")
        return 1
    return gui_main()


if __name__ == "__main__":
    sys.exit(main())
