"""
nwdiff Package
==============

Token-level comparison of line pairs. Each pair of differing lines is
tokenized, globally aligned with Needleman-Wunsch, and the alignment is
classified into matches, substitutions, insertions and deletions.

Modules:
    - tokenizer: Splits a line into words or characters.
    - engine: Score/direction matrix (global alignment).
    - classifier: Backtracking into edit operations.
    - stats: Session counters and per-column substitution counts.
    - formats: Known tabular schemas (SAM, PAF).
    - comparator: Per line-pair pipeline.
    - input_controller: Lock-step line reading.
    - visualizer: Console rendering and summary.
"""
from .classifier import EditClassifier
from .comparator import LineComparator
from .engine import AlignmentEngine, AlignmentMatrix, DEFAULT_CONFIG
from .formats import Schema
from .models import (
    Deletion, Direction, EditOp, Granularity, Insertion, LineDiff, Match,
    Substitution, Token,
)
from .stats import DiffStats, FieldStats
from .tokenizer import tokenize

__all__ = [
    "AlignmentEngine", "AlignmentMatrix", "DEFAULT_CONFIG", "Deletion",
    "DiffStats", "Direction", "EditClassifier", "EditOp", "FieldStats",
    "Granularity", "Insertion", "LineComparator", "LineDiff", "Match",
    "Schema", "Substitution", "Token", "tokenize",
]
