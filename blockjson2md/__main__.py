"""`python -m blockjson2md` regenerates the core blocks reference."""

import sys

from .blockjson2md import main

if __name__ == "__main__":
    sys.exit(main())
