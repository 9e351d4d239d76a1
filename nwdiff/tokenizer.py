import re
from typing import List
from .models import Granularity, Token

WORD_PATTERN = re.compile(r'(\S+)(\s*)')
LEADING_WS = re.compile(r'\s*')


def tokenize(line: str, granularity: Granularity = Granularity.WORD) -> List[Token]:
    """
    Splits a line into comparison units without losing any of its text.

    Word mode keeps the whitespace following each word as the token's
    separator. Leading whitespace rides on the first word as its prefix, so
    token indices are word indices. A whitespace-only line becomes a single
    token with empty text; an empty line becomes no tokens at all.

    Args:
        line (str): The line, without its terminator.
        granularity (Granularity): WORD or CHAR.

    Returns:
        List[Token]: Tokens whose ``source`` values concatenate to ``line``.
    """
    if granularity is Granularity.CHAR:
        return [Token(ch) for ch in line]

    leading = LEADING_WS.match(line).group(0)
    tokens = [Token(m.group(1), m.group(2)) for m in WORD_PATTERN.finditer(line, len(leading))]
    if not tokens:
        return [Token("", leading)] if leading else []
    if leading:
        tokens[0] = Token(tokens[0].text, tokens[0].separator, prefix=leading)
    return tokens
