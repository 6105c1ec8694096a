#!/usr/bin/env python3
"""
pokezone - battle & capture rules engine

Thin wrapper around the developer CLI in pokezone.cli.

To run: python main.py --help
"""

from pokezone.cli import main

if __name__ == "__main__":
    main()
