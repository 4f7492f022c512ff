#!/usr/bin/env python3
"""Swap or add liquidity: python -m scripts.interact swap --amount 10"""

import sys

from pooldeploy.interact import main

if __name__ == "__main__":
    sys.exit(main())
