"""
Console module for terminal TicTacToe.
Handles screen output and keyboard input.
"""

from .config import ConsoleConfig, UnsupportedPlatformError
from .screen import Screen
from .input_reader import MoveReader
