"""Allow ``python -m cellsim``."""

import sys

from cellsim.cli import main

if __name__ == "__main__":
    sys.exit(main())
