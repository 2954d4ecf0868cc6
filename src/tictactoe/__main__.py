"""Allow ``python -m tictactoe``."""

from __future__ import annotations

import sys

from tictactoe.app import main

if __name__ == "__main__":
    sys.exit(main())
