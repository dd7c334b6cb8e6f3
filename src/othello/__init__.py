"""
Othello rules engine.
"""

__version__ = "0.1"
