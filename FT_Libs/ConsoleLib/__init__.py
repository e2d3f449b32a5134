"""
ConsoleLib - Interactive console and command line entry point.
"""

from FT_Libs.ConsoleLib.prompts import ConsolePrompter, parse_location
from FT_Libs.ConsoleLib.console_app import FauxtoshopConsole, build_arg_parser, format_filter_menu, main

__all__ = [
    "ConsolePrompter",
    "parse_location",
    "FauxtoshopConsole",
    "build_arg_parser",
    "format_filter_menu",
    "main",
]
