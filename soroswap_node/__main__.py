"""Allow ``python -m soroswap_node``."""

import sys

from .node import main

if __name__ == "__main__":
    sys.exit(main())
