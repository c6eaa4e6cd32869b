import sys
import os

tests_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(tests_dir)

# Project root for pixelgrid, tests dir for the shared samples module
for path in (project_root, tests_dir):
    if path not in sys.path:
        sys.path.insert(0, path)
