import os
import sys

# Automatically add the src directory to sys.path
# This allows tests to import option_lattice without an editable install
# (e.g., python -m pytest from the project root)

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(TESTS_DIR, ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
