"""Shared helpers for term normalization."""

from __future__ import annotations

import unicodedata


def upper_letter(char: str) -> str:
    """Uppercase a single character without letting it expand.

    ``"ß".upper()`` is ``"SS"``; such characters are kept as they are so that
    one character of the term always maps onto one grid cell.
    """

    upper = char.upper()
    return upper if len(upper) == 1 else char


def normalize_term(text: str) -> str:
    """Return the grid spelling of ``text``: NFC, stripped and uppercased."""

    if not text:
        return ""
    composed = unicodedata.normalize("NFC", text.strip())
    return "".join(upper_letter(char) for char in composed)


__all__ = ["normalize_term", "upper_letter"]
