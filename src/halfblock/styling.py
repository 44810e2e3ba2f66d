"""Truecolor ANSI styling for single terminal cells."""

import re

ESC = "\033"
RESET = f"{ESC}[0m"

# Lower half block: the foreground colour fills the bottom half of the cell
LOWER_HALF_BLOCK = "▄"

_SGR = re.compile(r"\033\[[0-9;]*m")

RGB = tuple[int, int, int]


def paint(char: str, background: RGB, foreground: RGB) -> str:
    """Wrap a character in truecolor background and foreground escapes."""
    br, bg, bb = background
    fr, fg, fb = foreground
    return f"{ESC}[48;2;{br};{bg};{bb}m{ESC}[38;2;{fr};{fg};{fb}m{char}{RESET}"


def plain(char: str = " ") -> str:
    """A character drawn with the terminal's default colours."""
    return f"{RESET}{char}"


def strip_styles(text: str) -> str:
    return _SGR.sub("", text)
