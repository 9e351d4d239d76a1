import os
import tempfile
import unittest
from nwdiff.comparator import LineComparator, WINDOW_PER_WORKER
from nwdiff.input_controller import InputController
from nwdiff.models import Granularity, Substitution
from nwdiff.stats import DiffStats


class TestInputController(unittest.TestCase):
    def setUp(self):
        self.controller = InputController()
        self.tmp = tempfile.TemporaryDirectory()
        self.path_a = os.path.join(self.tmp.name, "a.txt")
        self.path_b = os.path.join(self.tmp.name, "b.txt")

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, path, data):
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(data)

    def test_lock_step_pairs(self):
        self.write(self.path_a, "line 1\nline 2\n")
        self.write(self.path_b, "line 1\nline 3\n")
        pairs = list(self.controller.pairs(self.path_a, self.path_b))
        self.assertEqual(pairs, [(0, "line 1", "line 1"), (1, "line 2", "line 3")])

    def test_shorter_input_truncates(self):
        self.write(self.path_a, "a\nb\nc\n")
        self.write(self.path_b, "a\nb")
        pairs = list(self.controller.pairs(self.path_a, self.path_b))
        self.assertEqual(len(pairs), 2)
        self.assertEqual(pairs[1], (1, "b", "b"))

    def test_crlf_stripped(self):
        self.write(self.path_a, "one\r\ntwo\r\n")
        self.write(self.path_b, "one\ntwo\n")
        pairs = list(self.controller.pairs(self.path_a, self.path_b))
        self.assertTrue(all(a == b for _, a, b in pairs))

    def test_missing_file(self):
        self.write(self.path_a, "x\n")
        with self.assertRaises(FileNotFoundError):
            list(self.controller.pairs(self.path_a, os.path.join(self.tmp.name, "missing.txt")))


class TestComparatorRun(unittest.TestCase):
    PAIRS = [
        (0, "same line", "same line"),
        (1, "the cat sat", "the dog sat"),
        (2, "x y", "x  y"),
        (3, "keep", "keep going"),
    ]

    def test_skips_identical_lines(self):
        stats = DiffStats()
        diffs = list(LineComparator().run(self.PAIRS, stats))
        self.assertEqual([d.index for d in diffs], [1, 2, 3])
        self.assertIsInstance(diffs[0].ops[1], Substitution)

    def test_whitespace_only_change_is_not_counted(self):
        stats = DiffStats()
        diffs = list(LineComparator().run(self.PAIRS, stats))
        self.assertFalse(diffs[1].changed)
        self.assertEqual(stats.changed_lines, 2)
        self.assertEqual(stats.substitutions, 1)
        self.assertEqual(stats.insertions, 1)

    def test_worker_threads_match_sequential(self):
        sequential, threaded = DiffStats(), DiffStats()
        expected = list(LineComparator().run(self.PAIRS, sequential))
        actual = list(LineComparator().run(self.PAIRS, threaded, jobs=3))
        self.assertEqual([d.ops for d in actual], [d.ops for d in expected])
        self.assertEqual(threaded.snapshot(), sequential.snapshot())

    def test_worker_threads_read_ahead_is_bounded(self):
        consumed = []

        def pairs():
            for i in range(1000):
                consumed.append(i)
                yield i, f"line {i} a", f"line {i} b"

        diffs = LineComparator().run(pairs(), DiffStats(), jobs=2)
        first = next(diffs)
        self.assertEqual(first.index, 0)
        self.assertEqual(len(consumed), 2 * WINDOW_PER_WORKER)
        diffs.close()

    def test_empty_pair(self):
        self.assertEqual(LineComparator().compare("", ""), [])
        stats = DiffStats()
        self.assertEqual(list(LineComparator(Granularity.CHAR).run([(0, "", "")], stats)), [])
        self.assertEqual(stats.changed_lines, 0)


if __name__ == '__main__':
    unittest.main()
