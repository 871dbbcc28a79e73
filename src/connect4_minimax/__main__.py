import sys

from connect4_minimax.cli import main

sys.exit(main())
