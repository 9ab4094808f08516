"""On-screen keyboard layouts.

The digit row is shown for Easy and Hard, the letter rows for Medium and
Hard (see GameController._show_layouts).
"""

DIGIT_ROWS: list[str] = ["1234567890"]

LETTER_ROWS: list[str] = [
    "QWERTYUIOP",
    "ASDFGHJKL",
    "ZXCVBNM",
]


def key_id(symbol: str) -> str:
    """Widget ID of the key labelled `symbol`."""
    return f"key-{symbol}"
