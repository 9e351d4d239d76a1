"""
Known tabular record layouts used for per-column substitution counts.
"""
from enum import Enum
from typing import Optional, Tuple


class Schema(Enum):
    """
    Closed set of column schemas.

    Each member's value is ``(display name, ordered column names)``.
    NONE tracks positions without naming any column.
    """
    SAM = ("SAM", (
        "qname", "flag", "rname", "pos", "mapq", "cigar",
        "rnext", "pnext", "tlen", "seq", "qual"
    ))
    PAF = ("PAF", (
        "qname", "qlen", "qstart", "qend", "strand", "tname",
        "tlen", "tstart", "tend", "matches", "blocklen", "mapq"
    ))
    NONE = ("basic", ())

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def field_names(self) -> Tuple[str, ...]:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> Optional["Schema"]:
        """Case-insensitive lookup. Returns None for an unrecognized name."""
        if not name:
            return None
        return cls.__members__.get(name.strip().upper())
