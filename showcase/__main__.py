"""Allow running the showcase with ``python -m showcase``."""

import sys

from showcase.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
