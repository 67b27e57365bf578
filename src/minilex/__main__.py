"""Allow ``python -m minilex``."""

import sys

from minilex.cli import main

if __name__ == "__main__":
    sys.exit(main())
