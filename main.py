#!/usr/bin/env python3
"""Stylemark - toggle italic/bold/underline with undo, redo and history jumps.

Usage:
    python main.py [--textual] [--log-file PATH] [--debug] [text]

Controls:
    i / b / u: Toggle italic, bold, underline
    z / y: Undo, redo
    Up/Down + Enter: Jump to a history entry
    Home: Back to the initial state
    q: Quit
"""

from stylemark.__main__ import main


if __name__ == "__main__":
    main()
