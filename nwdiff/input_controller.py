from typing import Iterator, Tuple


class InputController:
    """
    Reads two inputs in lock-step, one line pair at a time.
    """

    def __init__(self, encoding: str = 'utf-8'):
        """
        Args:
            encoding (str): Encoding of both inputs. Undecodable bytes are
                replaced rather than rejected.
        """
        self.encoding = encoding

    def pairs(self, source_a: str, source_b: str) -> Iterator[Tuple[int, str, str]]:
        """
        Yields (index, line_a, line_b) for every line position both files have.

        Comparison stops at the end of the shorter file. Line terminators are
        stripped. A missing file raises FileNotFoundError.

        Args:
            source_a (str): Path of the first file.
            source_b (str): Path of the second file.
        """
        with open(source_a, 'r', encoding=self.encoding, errors='replace', newline='\n') as fa, \
                open(source_b, 'r', encoding=self.encoding, errors='replace', newline='\n') as fb:
            for i, (line_a, line_b) in enumerate(zip(fa, fb)):
                yield i, self.strip_terminator(line_a), self.strip_terminator(line_b)

    @staticmethod
    def strip_terminator(line: str) -> str:
        if line.endswith('\r\n'):
            return line[:-2]
        if line.endswith('\n'):
            return line[:-1]
        return line
