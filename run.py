#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Usage:
    python run.py play --player1 red --player2 yellow
    python run.py benchmark --iterations 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
