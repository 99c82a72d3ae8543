#!/usr/bin/env python3
"""
Minesweeper - main entry point.

Usage:
    python main.py --difficulty easy
    python main.py --width 10 --height 10 --mines 15
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
