# -*- coding: utf-8 -*-
"""
Disk Space Optimizer - reclaim disk space on Linux through the package manager
and journald.
"""

from diskoptimizer.constants import VERSION

__version__ = VERSION
