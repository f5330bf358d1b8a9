"""
Text matching utilities.
"""

from typing import Iterable


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Substring membership test for any keyword."""
    return any(keyword in text for keyword in keywords)
