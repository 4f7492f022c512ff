#!/usr/bin/env python3
"""Deploy two tokens and a pool: python -m scripts.deploy"""

import sys

from pooldeploy.deploy import main

if __name__ == "__main__":
    sys.exit(main())
