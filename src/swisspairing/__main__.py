"""Allow ``python -m swisspairing``."""

import sys

from swisspairing.cli import main

if __name__ == "__main__":
    sys.exit(main())
