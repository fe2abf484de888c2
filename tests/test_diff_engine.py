import random
import unittest

from linediff.core.diff_engine import diff, edit_distance, lcs_length, table_cells
from linediff.core.edits import Delete, Equal, Insert
from linediff.core.script_tools import apply_script, diff_stats, invert, modified_side, original_side


def oracle_lcs(a, b):
    # plain prefix DP, independent of the engine's suffix table
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp[len(a)][len(b)]


def random_pairs(count=300, seed=1234):
    rng = random.Random(seed)
    for _ in range(count):
        a = [rng.choice("abc") for _ in range(rng.randint(0, 9))]
        b = [rng.choice("abcd") for _ in range(rng.randint(0, 9))]
        yield a, b


class TestDiffScenarios(unittest.TestCase):
    def test_both_empty(self):
        self.assertEqual(diff([], []), [])

    def test_empty_modified_deletes_everything(self):
        self.assertEqual(diff(["a", "b"], []), [Delete(0, "a"), Delete(1, "b")])

    def test_empty_original_inserts_everything(self):
        self.assertEqual(diff([], ["x"]), [Insert(0, "x")])

    def test_single_line_change(self):
        self.assertEqual(
            diff(["a", "b", "c"], ["a", "x", "c"]),
            [Equal(0, 0, "a"), Delete(1, "b"), Insert(1, "x"), Equal(2, 2, "c")],
        )

    def test_duplicates_are_not_conflated(self):
        script = diff(["a", "a", "b"], ["a", "b", "a"])
        self.assertEqual(
            script,
            [Equal(0, 0, "a"), Delete(1, "a"), Equal(2, 1, "b"), Insert(2, "a")],
        )
        self.assertEqual(diff_stats(script).edit_distance, 2)

    def test_identical_is_all_equal(self):
        lines = ["x", "y", "x", ""]
        self.assertEqual(diff(lines, list(lines)),
                         [Equal(k, k, v) for k, v in enumerate(lines)])

    def test_disjoint_deletes_then_inserts(self):
        self.assertEqual(
            diff(["a", "b"], ["x", "y"]),
            [Delete(0, "a"), Delete(1, "b"), Insert(0, "x"), Insert(1, "y")],
        )

    def test_exact_equality_no_normalization(self):
        script = diff(["a ", "B"], ["a", "b"])
        self.assertFalse(any(isinstance(op, Equal) for op in script))


class TestTieBreak(unittest.TestCase):
    def test_delete_precedes_insert_at_same_point(self):
        script = diff(["p", "q", "r"], ["p", "s", "t", "r"])
        self.assertEqual(
            script,
            [Equal(0, 0, "p"), Delete(1, "q"), Insert(1, "s"), Insert(2, "t"), Equal(2, 3, "r")],
        )

    def test_insert_first_when_delete_is_not_minimal(self):
        self.assertEqual(diff(["b"], ["a", "b"]), [Insert(0, "a"), Equal(0, 1, "b")])

    def test_tie_prefers_deleting_before_matching_later(self):
        self.assertEqual(
            diff(["y", "c"], ["c", "c"]),
            [Delete(0, "y"), Equal(1, 0, "c"), Insert(1, "c")],
        )

    def test_deterministic(self):
        for a, b in random_pairs(50, seed=7):
            self.assertEqual(diff(a, b), diff(list(a), list(b)))


class TestDiffProperties(unittest.TestCase):
    def test_reconstruction(self):
        for a, b in random_pairs():
            script = diff(a, b)
            self.assertEqual(original_side(script), a)
            self.assertEqual(modified_side(script), b)
            self.assertEqual(apply_script(a, script), b)

    def test_indices_are_consecutive(self):
        for a, b in random_pairs(100, seed=99):
            script = diff(a, b)
            left = [op.original_index for op in script if not isinstance(op, Insert)]
            right = [op.modified_index for op in script if not isinstance(op, Delete)]
            self.assertEqual(left, list(range(len(a))))
            self.assertEqual(right, list(range(len(b))))

    def test_minimality(self):
        for a, b in random_pairs():
            expected = len(a) + len(b) - 2 * oracle_lcs(a, b)
            self.assertEqual(diff_stats(diff(a, b)).edit_distance, expected)
            self.assertEqual(edit_distance(a, b), expected)
            self.assertEqual(lcs_length(a, b), oracle_lcs(a, b))

    def test_symmetry(self):
        for a, b in random_pairs(100, seed=42):
            forward = invert(diff(a, b))
            backward = diff(b, a)
            self.assertEqual(apply_script(b, forward), a)
            self.assertEqual(diff_stats(forward).edit_distance,
                             diff_stats(backward).edit_distance)
            self.assertEqual(diff_stats(forward).equal, diff_stats(backward).equal)

    def test_table_cells_skip_shared_head(self):
        self.assertEqual(table_cells([], []), 1)
        self.assertEqual(table_cells(["a", "b"], ["x", "y", "z"]), 3 * 4)
        self.assertEqual(table_cells(["s", "s", "b"], ["s", "s", "x"]), 2 * 2)
        self.assertEqual(table_cells(["s", "t"], ["s", "t"]), 1)

    def test_inputs_untouched(self):
        a = ("a", "b", "c")
        b = ["c", "b"]
        diff(a, b)
        self.assertEqual(a, ("a", "b", "c"))
        self.assertEqual(b, ["c", "b"])


if __name__ == "__main__":
    unittest.main()
