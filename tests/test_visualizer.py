import unittest
from colored import Fore, Style
from nwdiff.comparator import LineComparator
from nwdiff.formats import Schema
from nwdiff.models import Granularity, LineDiff, Substitution, Token
from nwdiff.stats import DiffStats
from nwdiff.visualizer import ConsoleRenderer


class TestConsoleRenderer(unittest.TestCase):
    def setUp(self):
        self.plain = ConsoleRenderer(color=False)
        self.comparator = LineComparator()

    def test_plain_substitution(self):
        ops = self.comparator.compare("the cat sat", "the dog sat")
        self.assertEqual(self.plain.render(ops), ("the [~cat~] sat", "the [~dog~] sat"))

    def test_plain_insertion_and_deletion(self):
        ops = self.comparator.compare("a b", "a b c")
        self.assertEqual(self.plain.render(ops), ("a b", "a b {+c+}"))
        ops = self.comparator.compare("a b c", "a c")
        self.assertEqual(self.plain.render(ops), ("a [-b-] c", "a c"))

    def test_spacing_preserved(self):
        ops = self.comparator.compare("  x\t y", "  x\t y  z")
        line_a, line_b = self.plain.render(ops)
        self.assertEqual(line_a, "  x\t y")
        self.assertEqual(line_b, "  x\t y  {+z+}")

    def test_char_mode(self):
        ops = LineComparator(Granularity.CHAR).compare("abc", "abd")
        self.assertEqual(self.plain.render(ops), ("ab[~c~]", "ab[~d~]"))

    def test_colored(self):
        ops = self.comparator.compare("the cat", "the dog")
        line_a, line_b = ConsoleRenderer().render(ops)
        self.assertEqual(line_a, f"{Fore.white}the{Style.reset} {Fore.yellow}cat{Style.reset}")
        self.assertEqual(line_b, f"{Fore.white}the{Style.reset} {Fore.yellow}dog{Style.reset}")

    def test_indent_stays_outside_markers(self):
        ops = self.comparator.compare("  old word", "  new word")
        self.assertEqual(self.plain.render(ops), ("  [~old~] word", "  [~new~] word"))
        line_a, _ = ConsoleRenderer().render(ops)
        self.assertTrue(line_a.startswith(f"  {Fore.yellow}old{Style.reset} "))

    def test_format_diff(self):
        diff = LineDiff(4, "x", "y", [Substitution(Token("x"), Token("y"), pos=0, source_pos=0)])
        self.assertEqual(self.plain.format_diff(diff), "diff at 4:\n<[~x~]\n>[~y~]")

    def test_summary(self):
        stats = DiffStats()
        stats.record_line(self.comparator.compare("the cat sat", "the dog sat"))
        self.assertEqual(
            self.plain.format_summary(stats),
            "Summary: 1 lines changed, 0 insertions, 0 deletions, 1 substitutions")

    def test_summary_with_fields(self):
        stats = DiffStats.for_schema(Schema.SAM)
        stats.record(Substitution(Token("100"), Token("150"), pos=3))
        summary = self.plain.format_summary(stats).splitlines()
        self.assertIn("SAM field substitutions:", summary)
        self.assertIn("  pos: 1", summary)
        self.assertIn("  qname: 0", summary)
        self.assertEqual(len(summary), 3 + 11)


if __name__ == '__main__':
    unittest.main()
