from dataclasses import dataclass
from enum import Enum
from typing import List


class Granularity(Enum):
    """Unit of comparison inside a line."""
    WORD = "word"
    CHAR = "char"


class Direction(Enum):
    """Predecessor a matrix cell was computed from."""
    DIAGONAL = "diagonal"
    UP = "up"
    LEFT = "left"


@dataclass(frozen=True)
class Token:
    """
    One comparison unit of a line.

    Attributes:
        text (str): The word or single character compared during alignment.
        separator (str): Whitespace that followed the word in the source line.
            Always empty in character mode and at the end of a line.
        prefix (str): Leading whitespace of the line, carried by its first
            word. Not compared.
    """
    text: str
    separator: str = ""
    prefix: str = ""

    @property
    def source(self) -> str:
        """The exact slice of the line this token covers."""
        return self.prefix + self.text + self.separator


@dataclass(frozen=True)
class AlignmentCell:
    score: int
    origin: Direction


class EditOp:
    """Base class of the four classified alignment steps."""
    __slots__ = ()

    @property
    def is_edit(self) -> bool:
        """Whether this step counts as a change to the line."""
        return True


@dataclass(frozen=True)
class Match(EditOp):
    a: Token
    b: Token

    @property
    def is_edit(self) -> bool:
        return False


@dataclass(frozen=True)
class Substitution(EditOp):
    """
    Aligned tokens with different text.

    Attributes:
        pos (int): Index of ``b`` in the second (target) sequence. This is the
            column used for field attribution.
        source_pos (int): Index of ``a`` in the first sequence.
    """
    a: Token
    b: Token
    pos: int
    source_pos: int = -1


@dataclass(frozen=True)
class Insertion(EditOp):
    b: Token
    pos: int

    @property
    def is_edit(self) -> bool:
        # an empty-text token is a whitespace-only line; spacing is not an edit
        return bool(self.b.text)


@dataclass(frozen=True)
class Deletion(EditOp):
    a: Token
    pos: int

    @property
    def is_edit(self) -> bool:
        return bool(self.a.text)


@dataclass
class LineDiff:
    """
    A differing line pair and its alignment.

    Attributes:
        index (int): Zero-based line number in both inputs.
        line_a (str): Line from the first input.
        line_b (str): Line from the second input.
        ops (List[EditOp]): Edit operations in left-to-right reading order.
    """
    index: int
    line_a: str
    line_b: str
    ops: List[EditOp]

    @property
    def changed(self) -> bool:
        return any(op.is_edit for op in self.ops)
