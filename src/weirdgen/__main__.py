"""Allow ``python -m weirdgen``."""

import sys

from weirdgen.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
