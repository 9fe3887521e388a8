"""Entry point for ``python -m hamilton``."""

import sys

from hamilton.demo import main

if __name__ == '__main__':
    sys.exit(main())
