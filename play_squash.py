#!/usr/bin/env python3
"""
Main script to launch Squash Pong with PyGame graphical interface
"""

import sys

from squash_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== SQUASH PONG ===")
    print()
    print("CONTROLS:")
    print("  Press above the middle of the screen: paddle up")
    print("  Press below the middle of the screen: paddle down")
    print("  ESC: Quit")
    print()

    main(sys.argv[1:])
