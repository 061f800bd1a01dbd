"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
DIM = "\033[2m"
RED = "\033[31m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _supports_color() -> bool:
    """Check if stdout is a terminal."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def done(message: str) -> None:
    """Print a completed item with a green checkmark."""
    print(f"{_colorize(CHECK, GREEN)} {message}")


def pending(message: str) -> None:
    """Print a pending item with a yellow bullet."""
    print(f"{_colorize(BULLET, YELLOW)} {message}")


def detail(message: str) -> None:
    """Print an indented secondary line, dimmed."""
    print(f"  {_colorize(message, DIM)}")


def error(message: str) -> None:
    """Print error message with red cross."""
    print(f"{_colorize(CROSS, RED)} {message}", file=sys.stderr)
