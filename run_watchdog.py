#!/usr/bin/env python3
"""
Launcher script for the spot instance watchdog.
This script runs the watchdog from the project root.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from spot_watchdog.cli import main

if __name__ == "__main__":
    sys.exit(main())
