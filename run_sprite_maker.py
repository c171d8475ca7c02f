"""
run_sprite_maker.py — CLI Entry Point

This script serves as the command-line interface entry point for the
sprite maker project. It forwards execution to the modularized CLI logic
defined in `src/sprite_maker/cli.py`.

Usage:
    python run_sprite_maker.py --source-dir path/to/images --target sprite.png [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_sprite_maker.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import sprite_maker.cli as sm_cli

if __name__ == "__main__":
    sm_cli.main()
