"""
run_layout.py — CLI Entry Point

This script serves as the command-line interface entry point for the
HSI layout generator. It forwards execution to the CLI logic defined in
`src/hsi_layout_generator/cli.py`.

Usage:
    python run_layout.py --layout random --num-classes 5 --size 400 [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_layout.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import hsi_layout_generator.cli as hlg_cli

if __name__ == "__main__":
    hlg_cli.main()
