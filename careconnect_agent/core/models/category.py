"""
Tagged result of resolving a category label to a professional type id.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ResolvedCategory:
    """The label maps to one professional type id."""

    label: str
    type_id: str
    source: str  # "table" or "lookup"

    def id_variants(self) -> list:
        """Stored ids are a mix of strings and integers; match both."""
        variants: list = [self.type_id]
        if self.type_id.isdigit():
            variants.append(int(self.type_id))
        return variants


@dataclass(frozen=True)
class UnknownCategory:
    """Neither the fixed table nor the type collection knows the label."""

    label: str


CategoryResolution = Union[ResolvedCategory, UnknownCategory]
