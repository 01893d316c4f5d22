# src/cnbrate/__main__.py
"""Module entry point: python -m cnbrate"""

import sys

from cnbrate.app import main

sys.exit(main())
