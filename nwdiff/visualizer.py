from typing import List, Tuple
from colored import Fore, Style
from .models import Deletion, EditOp, Insertion, LineDiff, Match, Substitution, Token
from .stats import DiffStats


class ConsoleRenderer:
    """
    Renders aligned line pairs for a terminal, colored or plain.

    Colors: matches white, substitutions yellow, deletions red,
    insertions green. Plain output marks changed tokens instead.
    """

    PLAIN_MARKERS = {
        Substitution: ("[~", "~]"),
        Deletion: ("[-", "-]"),
        Insertion: ("{+", "+}"),
    }

    def __init__(self, color: bool = True):
        self.color = color
        self.palette = {
            Match: Fore.white,
            Substitution: Fore.yellow,
            Deletion: Fore.red,
            Insertion: Fore.green,
        }

    def render(self, ops: List[EditOp]) -> Tuple[str, str]:
        """
        Rebuilds both lines from their edit operations.

        Side A shows matches, substitutions and deletions; side B shows
        matches, substitutions and insertions. Original spacing is kept.

        Returns:
            Tuple[str, str]: (rendered line A, rendered line B)
        """
        side_a, side_b = [], []
        for op in ops:
            kind = type(op)
            if isinstance(op, (Match, Substitution, Deletion)):
                side_a.append(self._paint(op.a, kind))
            if isinstance(op, (Match, Substitution, Insertion)):
                side_b.append(self._paint(op.b, kind))
        return "".join(side_a), "".join(side_b)

    def _paint(self, token: Token, kind: type) -> str:
        # a whitespace-only line has nothing but spacing to show
        if not token.text or (kind is Match and not self.color):
            return token.source
        if self.color:
            return f"{token.prefix}{self.palette[kind]}{token.text}{Style.reset}{token.separator}"
        start, end = self.PLAIN_MARKERS[kind]
        return f"{token.prefix}{start}{token.text}{end}{token.separator}"

    def format_diff(self, diff: LineDiff) -> str:
        line_a, line_b = self.render(diff.ops)
        return f"diff at {diff.index}:\n<{line_a}\n>{line_b}"

    def format_summary(self, stats: DiffStats) -> str:
        lines = [
            f"Summary: {stats.changed_lines} lines changed, {stats.insertions} insertions, "
            f"{stats.deletions} deletions, {stats.substitutions} substitutions"
        ]
        if stats.field_stats is not None:
            lines.append("")
            lines.append(f"{stats.field_stats.format_name} field substitutions:")
            for name, count in stats.field_stats.report():
                if self.color:
                    name = f"{Fore.magenta}{name}{Style.reset}"
                lines.append(f"  {name}: {count}")
        return "\n".join(lines)
