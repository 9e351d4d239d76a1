import logging
from typing import Dict, List, Optional, Sequence
from .models import AlignmentCell, Direction, Token

logger = logging.getLogger(__name__)

# Scoring constants for every alignment
DEFAULT_CONFIG = {
    "MATCH_SCORE": 2,
    "MISMATCH_PENALTY": -1,
    "GAP_PENALTY": -2
}


class AlignmentMatrix:
    """
    Completed score/direction matrix of one global alignment.

    Cells are stored flat, row-major: cell (i, j) lives at ``i * cols + j``.
    Row i corresponds to the first i tokens of ``seq_a``, column j to the
    first j tokens of ``seq_b``.
    """

    def __init__(self, seq_a: Sequence[Token], seq_b: Sequence[Token]):
        self.seq_a = seq_a
        self.seq_b = seq_b
        self.rows = len(seq_a) + 1
        self.cols = len(seq_b) + 1
        self.cells: List[Optional[AlignmentCell]] = [None] * (self.rows * self.cols)

    def cell(self, i: int, j: int) -> AlignmentCell:
        return self.cells[i * self.cols + j]

    def set(self, i: int, j: int, cell: AlignmentCell):
        self.cells[i * self.cols + j] = cell

    @property
    def score(self) -> int:
        """Score of the optimal global alignment (the bottom-right cell)."""
        return self.cell(self.rows - 1, self.cols - 1).score


class AlignmentEngine:
    """
    Needleman-Wunsch global aligner over token sequences.
    """

    def __init__(self, config: Optional[Dict] = None):
        """
        Args:
            config (dict, optional): Scoring overrides. Missing keys fall back
                to DEFAULT_CONFIG.
        """
        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)
        self.match_score = self.config["MATCH_SCORE"]
        self.mismatch_penalty = self.config["MISMATCH_PENALTY"]
        self.gap_penalty = self.config["GAP_PENALTY"]

    @staticmethod
    def pick(diagonal: int, up: int, left: int) -> AlignmentCell:
        """
        Chooses the best predecessor.

        Ties resolve Left, then Up, then Diagonal: the first candidate in that
        order that is >= both others wins.
        """
        if left >= up and left >= diagonal:
            return AlignmentCell(left, Direction.LEFT)
        if up >= diagonal:
            return AlignmentCell(up, Direction.UP)
        return AlignmentCell(diagonal, Direction.DIAGONAL)

    def align(self, seq_a: Sequence[Token], seq_b: Sequence[Token]) -> AlignmentMatrix:
        """
        Fills the full (m+1) x (n+1) matrix for two token sequences.

        Either sequence may be empty; the result is then the trivial all-gap
        alignment.

        Args:
            seq_a (Sequence[Token]): Tokens of the first line.
            seq_b (Sequence[Token]): Tokens of the second line.

        Returns:
            AlignmentMatrix: The completed matrix, ready for backtracking.
        """
        matrix = AlignmentMatrix(seq_a, seq_b)
        m, n = len(seq_a), len(seq_b)
        logger.debug("Aligning %d x %d tokens", m, n)

        # Row 0 and column 0 are pure gap prefixes
        matrix.set(0, 0, AlignmentCell(0, Direction.DIAGONAL))
        for i in range(1, m + 1):
            matrix.set(i, 0, AlignmentCell(i * self.gap_penalty, Direction.UP))
        for j in range(1, n + 1):
            matrix.set(0, j, AlignmentCell(j * self.gap_penalty, Direction.LEFT))

        for i in range(1, m + 1):
            text_a = seq_a[i - 1].text
            for j in range(1, n + 1):
                if text_a == seq_b[j - 1].text:
                    diagonal = matrix.cell(i - 1, j - 1).score + self.match_score
                else:
                    diagonal = matrix.cell(i - 1, j - 1).score + self.mismatch_penalty
                up = matrix.cell(i - 1, j).score + self.gap_penalty
                left = matrix.cell(i, j - 1).score + self.gap_penalty
                matrix.set(i, j, self.pick(diagonal, up, left))

        return matrix
