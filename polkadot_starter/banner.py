"""Welcome banner shown when the CLI starts."""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape

from .utils import console

LOGO_LINES: tuple[str, ...] = (
    "             ..            ",
    "             ::::..        ",
    "          .:;;::::.        ",
    "     .+XXXXXXx;:::.        ",
    "     .:::;+xxXXx+;.        ",
    "     .::::::::;;:..        ",
    "     .:::::::::::::::.     ",
    "     ...:;+;:::::::::..    ",
    " .:+xxXXXXXXXxx+;::::..    ",
    " .:+++++++xxxXXXXXX+;..    ",
    " .:++++++++++++++;::..     ",
    "  .:;+++++++++++++++++++:. ",
    "    ....:+x+++++++++++++;. ",
    "   .+xxxxXXXXXXxxxx+++++;. ",
    "   .++++++++xxXXXXXXXXx+:. ",
    "   .++++++++++:..          ",
    "   ..:;++++++;             ",
    "         ..:;;             ",
)

TITLE = "POLKADOT CLOUD STARTER"
WELCOME_MESSAGE = "Welcome to Polkadot Cloud Project Starter by WEB3DEV"


def center_lines(lines: Sequence[str], width: int) -> list[str]:
    """Left-pad *lines* as a block so the longest one is centred in *width*.

    The block keeps its internal alignment. Lines wider than *width* are
    not padded.
    """
    if not lines:
        return []
    longest = max(len(line) for line in lines)
    padding = " " * max(0, (width - longest) // 2)
    return [padding + line for line in lines]


def display_welcome_art(width: int | None = None) -> None:
    """Print the logo, the title and the welcome message, centred.

    Args:
        width: Target width in columns. Defaults to the console width.
    """
    width = width or console.width

    console.print()
    for line in center_lines(LOGO_LINES, width):
        console.print(f"[magenta]{escape(line)}[/magenta]", highlight=False, soft_wrap=True)
    console.print()
    for line in center_lines([TITLE], width):
        console.print(f"[bold]{line}[/bold]", highlight=False, soft_wrap=True)
    console.print()
    for line in center_lines([WELCOME_MESSAGE], width):
        console.print(line, highlight=False, soft_wrap=True)
    console.print()
