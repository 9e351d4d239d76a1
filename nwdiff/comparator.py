import collections
import concurrent.futures
import logging
from typing import Iterable, Iterator, List, Optional, Tuple
from .classifier import EditClassifier
from .engine import AlignmentEngine
from .models import EditOp, Granularity, LineDiff
from .stats import DiffStats
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

WINDOW_PER_WORKER = 4


class LineComparator:
    """
    Runs the tokenize -> align -> classify pipeline over line pairs.
    """

    def __init__(self, granularity: Granularity = Granularity.WORD,
                 engine: Optional[AlignmentEngine] = None,
                 classifier: Optional[EditClassifier] = None):
        self.granularity = granularity
        self.engine = engine or AlignmentEngine()
        self.classifier = classifier or EditClassifier()

    def compare(self, line_a: str, line_b: str) -> List[EditOp]:
        """Aligns two lines and returns their classified edit operations."""
        matrix = self.engine.align(
            tokenize(line_a, self.granularity),
            tokenize(line_b, self.granularity))
        return self.classifier.classify(matrix)

    def run(self, pairs: Iterable[Tuple[int, str, str]], stats: DiffStats,
            jobs: int = 1) -> Iterator[LineDiff]:
        """
        Compares every differing line pair and updates the session stats.

        Args:
            pairs: (index, line_a, line_b) tuples in input order.
            stats (DiffStats): Session aggregate, updated once per pair.
            jobs (int): Worker threads used for alignment. Stats are only
                ever updated from the calling thread.

        Yields:
            LineDiff: One per differing pair, in input order.
        """
        differing = ((idx, a, b) for idx, a, b in pairs if a != b)

        if jobs <= 1:
            for idx, line_a, line_b in differing:
                yield self._record(LineDiff(idx, line_a, line_b, self.compare(line_a, line_b)), stats)
            return

        logger.debug("Aligning with %d worker threads", jobs)
        window = collections.deque()
        with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
            for pair in differing:
                window.append(executor.submit(self._diff, pair))
                # at most jobs * WINDOW_PER_WORKER pairs are read ahead
                if len(window) >= jobs * WINDOW_PER_WORKER:
                    yield self._record(window.popleft().result(), stats)
            while window:
                yield self._record(window.popleft().result(), stats)

    def _diff(self, pair: Tuple[int, str, str]) -> LineDiff:
        idx, line_a, line_b = pair
        return LineDiff(idx, line_a, line_b, self.compare(line_a, line_b))

    @staticmethod
    def _record(diff: LineDiff, stats: DiffStats) -> LineDiff:
        stats.record_line(diff.ops)
        return diff
