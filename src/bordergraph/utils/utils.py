# -*- coding: utf-8 -*-
"""
General-purpose utilities for bordergraph.

This module provides small helpers for:

- lightweight number formatting (`to_engineering_notation`).
- console rendering of node sequences (`format_path`).
- multi-line warning messages (`bullet_message`).
"""

from __future__ import annotations

from typing import Iterable, List

__all__ = [
    "to_engineering_notation",
    "format_path",
    "bullet_message",
]


# -----------------------------------------------------------------------------
# Data formatting helpers
# -----------------------------------------------------------------------------
def to_engineering_notation(number: float | int) -> str:
    """
    Convert a number to engineering notation (multiples of `10^3`).

    Returns a string with the value and the corresponding suffix (e.g., ``"3.2k"``, ``"1.5M"``).
    Available suffixes : `["k", "M", "G", "T", "P"]`

    Parameters
    ----------
    number : float or int
        Numeric value to convert.

    Returns
    -------
    str
        Engineering-notation string.

    Examples
    --------
    >>> to_engineering_notation(1530)
    '1.53k'
    """
    if number == 0:
        return "0"

    suffixes = ["", "k", "M", "G", "T", "P"]
    magnitude = max(0, min(len(suffixes) - 1, int((len(str(int(abs(number)))) - 1) // 3)))
    scaled_number = number / (10 ** (3 * magnitude))
    return f"{scaled_number:.3g}{suffixes[magnitude]}"


def format_path(nodes: Iterable[str], separator: str = " -> ") -> str:
    """
    Join a node sequence for console output.

    >>> format_path(["France", "Belgium", "Netherlands"])
    'France -> Belgium -> Netherlands'
    """
    return separator.join(str(node) for node in nodes)


def bullet_message(context: str, summary: str, details: List[str]) -> str:
    """
    Build a readable, multi-line message for ``warnings.warn``.

    Parameters
    ----------
    context : str
        Short context label (e.g., "Edge list").
    summary : str
        One-line summary of the issue.
    details : list of str
        Bullet points explaining the action taken and hints.

    Returns
    -------
    str
        Message starting with a newline to separate it from the warning header.
    """
    return "\n" + f"{context}: {summary}\n" + "\n".join(f"• {line}" for line in details)


# -----------------------------------------------------------------------------
# Manual test (no side effects at import)
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    print(to_engineering_notation(0))
    print(to_engineering_notation(500000000))
    print(format_path(["Greece", "Bulgaria", "Romania"]))
