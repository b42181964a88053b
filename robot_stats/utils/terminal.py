# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Terminal formatting utilities for robot-stats."""

import os

from colorama import Fore, Style, init

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Semantic color scheme for the CLI verdict and error lines."""

    ERROR = Fore.RED
    WARNING = Fore.YELLOW
    SUCCESS = Fore.GREEN
    RESET = Style.RESET_ALL

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    @classmethod
    def _color(cls, color: str, text: str) -> str:
        if cls.NO_COLOR:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        return cls._color(cls.ERROR, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format warning text in yellow."""
        return cls._color(cls.WARNING, text)

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        return cls._color(cls.SUCCESS, text)


# Single instance for use across the codebase
terminal = TerminalColors()
