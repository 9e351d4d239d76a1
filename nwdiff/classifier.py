from typing import List
from .engine import AlignmentMatrix
from .models import Deletion, Direction, EditOp, Insertion, Match, Substitution


class EditClassifier:
    """
    Turns a completed alignment matrix into classified edit operations.
    """

    def classify(self, matrix: AlignmentMatrix) -> List[EditOp]:
        """
        Backtracks from the bottom-right cell to the origin.

        Every step decreases i + j, so the walk always reaches (0, 0).

        Args:
            matrix (AlignmentMatrix): Output of AlignmentEngine.align.

        Returns:
            List[EditOp]: Operations in left-to-right reading order.
        """
        seq_a, seq_b = matrix.seq_a, matrix.seq_b
        ops = []
        i, j = matrix.rows - 1, matrix.cols - 1

        while i > 0 or j > 0:
            origin = matrix.cell(i, j).origin
            if origin is Direction.DIAGONAL:
                a, b = seq_a[i - 1], seq_b[j - 1]
                if a.text == b.text:
                    ops.append(Match(a, b))
                else:
                    ops.append(Substitution(a, b, pos=j - 1, source_pos=i - 1))
                i -= 1
                j -= 1
            elif origin is Direction.UP:
                ops.append(Deletion(seq_a[i - 1], pos=i - 1))
                i -= 1
            else:
                ops.append(Insertion(seq_b[j - 1], pos=j - 1))
                j -= 1

        ops.reverse()
        return ops
