"""
Script to benchmark the Othello engine with random playouts.
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.benchmark import main

if __name__ == "__main__":
    sys.exit(main())
