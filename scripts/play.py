#!/usr/bin/env python3
"""
Terminal Play Mode - Play the Snake game in the current terminal.

Controls:
    Arrow Keys or WASD: Steer the snake
    Ctrl-C: Quit
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from termsnake.app import main


if __name__ == "__main__":
    sys.exit(main())
