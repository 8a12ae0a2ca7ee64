"""CLI package for the River Flooding Digital Twin.

Execute via:
  python -m river_flooding.cli <command> [options]

Or, once installed, through the console script:
  river-flooding <command>

Commands implemented in `main.py` using the standard library `argparse`.
"""

from .main import main  # re-export for python -m river_flooding.cli

__all__ = ["main"]
