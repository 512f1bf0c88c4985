#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Allow ``python -m diskoptimizer``."""

import sys

from diskoptimizer.cli import main

if __name__ == "__main__":
    sys.exit(main())
