#!/usr/bin/env python3
"""Interactive calculator entry point: python -m big_integer"""

import sys

from big_integer.menu import main

if __name__ == "__main__":
    sys.exit(main())
