#!/usr/bin/env python3
"""
Play Minimax in the terminal.

Usage:
    python scripts/play.py --config configs/minimax_tree/default.yaml
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from minimax_game.play.shell import main


if __name__ == "__main__":
    main()
