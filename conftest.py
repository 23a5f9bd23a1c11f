"""
Root conftest — puts scripts/ on sys.path so tests import stayscout and the CLI.
"""

import os
import sys

_scripts_dir = os.path.join(os.path.dirname(__file__), "scripts")
if _scripts_dir not in sys.path:
    sys.path.insert(0, _scripts_dir)
