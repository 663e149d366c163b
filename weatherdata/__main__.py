"""Allow ``python -m weatherdata``."""
import sys

from weatherdata.cli import main

if __name__ == "__main__":
    sys.exit(main())
