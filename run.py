#!/usr/bin/env python3
"""
run.py - Main entry point for the dropfour terminal game
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dropfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
