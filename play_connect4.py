#!/usr/bin/env python3
"""
Play Connect Four against the minimax engine.
You play as Red (🔴) and move first, the computer plays Yellow (🟡).
Run with --help for other line-ups.
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from connect4_minimax.cli import main

if __name__ == "__main__":
    sys.exit(main())
