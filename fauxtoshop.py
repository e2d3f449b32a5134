"""
Fauxtoshop - scatter, edge detection, green screen and compare filters.

Run ``python fauxtoshop.py`` for the interactive console, or
``python fauxtoshop.py --help`` for the headless options.
"""

import sys

from FT_Libs.ConsoleLib.console_app import main


if __name__ == "__main__":
    sys.exit(main())
