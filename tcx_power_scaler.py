#!/usr/bin/env python3
"""
TCX Power Scaler - Entry point script.

Scale the power readings in .tcx activity files, keeping a backup of each file.

Usage:
    python tcx_power_scaler.py [options]

Examples:
    python tcx_power_scaler.py --scale 0.95
    python tcx_power_scaler.py --folder ./rides --scale 1.05 --dry-run
    python tcx_power_scaler.py scale:0.95 folder:"./rides"
"""

import sys
from tcx_power_scaler.main import main

if __name__ == '__main__':
    sys.exit(main())
