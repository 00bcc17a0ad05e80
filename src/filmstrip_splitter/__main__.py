"""Entry point for `python -m filmstrip_splitter`."""

import sys

from filmstrip_splitter.cli import main


if __name__ == "__main__":
    sys.exit(main())
