"""Test helpers."""


def normalize(text: str) -> str:
    """Collapse all whitespace runs so DDL can be compared loosely."""
    return " ".join(text.split())
