from __future__ import annotations


def clean_input(text: str) -> list[str]:
    """Lowercase `text` and split it on runs of whitespace."""

    return text.strip().lower().split()
