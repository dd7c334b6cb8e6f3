"""
Main script to play Othello in the terminal.
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.cli import main

if __name__ == "__main__":
    sys.exit(main())
