from typing import Dict, Iterable, List, Optional, Tuple
from .formats import Schema
from .models import Deletion, EditOp, Insertion, Substitution

UNKNOWN_FIELD = "unknown"


class FieldStats:
    """
    Per-column substitution counts for one tabular schema.

    Counts are keyed by column index. Every schema column has a slot from the
    start; indices past the schema are accepted and reported as unknown.
    """

    def __init__(self, schema: Schema):
        self.schema = schema
        self.format_name = schema.display_name
        self.field_names = list(schema.field_names)
        self.counts: Dict[int, int] = {idx: 0 for idx in range(len(self.field_names))}

    def increment(self, idx: int):
        self.counts[idx] = self.counts.get(idx, 0) + 1

    def field_name(self, idx: int) -> str:
        if 0 <= idx < len(self.field_names):
            return self.field_names[idx]
        return UNKNOWN_FIELD

    def merge(self, other: "FieldStats"):
        for idx, count in other.counts.items():
            self.counts[idx] = self.counts.get(idx, 0) + count

    def report(self) -> List[Tuple[str, int]]:
        """
        Lists counts in schema order, zero counts included.

        Out-of-schema positions follow the schema columns, labelled
        ``unknown[<index>]``.
        """
        rows = []
        for idx in sorted(self.counts):
            name = self.field_name(idx)
            if name == UNKNOWN_FIELD:
                name = f"{UNKNOWN_FIELD}[{idx}]"
            rows.append((name, self.counts[idx]))
        return rows


class DiffStats:
    """
    Running edit counts for a whole comparison session.

    One instance is created before the first line pair and passed through
    the processing loop. It is not thread-safe: concurrent workers must
    either hand their results to a single recording thread or keep their
    own instance and merge it afterwards.
    """

    def __init__(self, field_stats: Optional[FieldStats] = None):
        self.insertions = 0
        self.deletions = 0
        self.substitutions = 0
        self.changed_lines = 0
        self.field_stats = field_stats

    @classmethod
    def for_schema(cls, schema: Optional[Schema]) -> "DiffStats":
        """Session stats with column counts for ``schema``; NONE counts no columns."""
        if schema is None or schema is Schema.NONE:
            return cls()
        return cls(FieldStats(schema))

    def record(self, op: EditOp):
        if not op.is_edit:
            return
        if isinstance(op, Substitution):
            self.substitutions += 1
            if self.field_stats is not None:
                self.field_stats.increment(op.pos)
        elif isinstance(op, Insertion):
            self.insertions += 1
        elif isinstance(op, Deletion):
            self.deletions += 1

    def record_changed_line(self):
        self.changed_lines += 1

    def record_line(self, ops: Iterable[EditOp]) -> bool:
        """
        Records every operation of one line pair.

        Returns:
            bool: True if the line counted as changed (any edit op).
        """
        changed = False
        for op in ops:
            self.record(op)
            if op.is_edit:
                changed = True
        if changed:
            self.record_changed_line()
        return changed

    def merge(self, other: "DiffStats"):
        """
        Adds another partial aggregate into this one.

        Column counts are adopted when this aggregate has none yet. Both
        sides must otherwise use the same schema.
        """
        self.insertions += other.insertions
        self.deletions += other.deletions
        self.substitutions += other.substitutions
        self.changed_lines += other.changed_lines
        if other.field_stats is None:
            return
        if self.field_stats is None:
            self.field_stats = FieldStats(other.field_stats.schema)
        elif self.field_stats.schema is not other.field_stats.schema:
            raise ValueError(
                f"cannot merge {other.field_stats.format_name} field counts "
                f"into {self.field_stats.format_name}")
        self.field_stats.merge(other.field_stats)

    def snapshot(self) -> Dict[str, int]:
        return {
            "insertions": self.insertions,
            "deletions": self.deletions,
            "substitutions": self.substitutions,
            "changed_lines": self.changed_lines
        }
