#!/usr/bin/env python3
"""
Timing comparison of the naive DFT, recursive FFT and in-place iterative FFT

Prints the first bins of each transform and its elapsed time for a sine
test signal of the requested length.

Usage:
    python run_transforms.py [SIGNAL_LENGTH] [--config CONFIG_PATH] [--output OUTPUT_JSON]
"""

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.benchmark.cli import main


if __name__ == '__main__':
    sys.exit(main())
