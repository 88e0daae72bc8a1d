"""Pytest configuration to make the tool modules under python/ importable.

This lets ``import rot13`` work when the tests are run from a source checkout
without installing the package first.
"""

import os
import sys

# Tool scripts live in python/ next to this tests/ folder
TOOLS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'python')

if TOOLS_DIR not in sys.path:
    sys.path.insert(0, TOOLS_DIR)
