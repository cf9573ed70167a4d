import io
import os
import sys
import unittest
from contextlib import redirect_stdout

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import demo
import matplotlib.pyplot as plt
from hash_map import HashMap


class TestBucketStats(unittest.TestCase):
    def test_bucket_lengths_counts_unallocated_as_zero(self):
        m = HashMap(1, 4)
        m._buckets[2] = [["a", 1], ["b", 2]]
        m._size = 2
        self.assertEqual(demo.bucket_lengths(m).tolist(), [0, 0, 2, 0])

    def test_bucket_lengths_sum_to_size(self):
        m = HashMap()
        for i in range(50):
            m.set(f"k{i}", i)
        self.assertEqual(int(demo.bucket_lengths(m).sum()), m.length())

    def test_chain_stats_empty_map(self):
        stats = demo.chain_stats(HashMap())
        self.assertEqual(stats["size"], 0)
        self.assertEqual(stats["max_chain"], 0)
        self.assertEqual(stats["mean_chain"], 0.0)
        self.assertEqual(stats["empty_buckets"], 16)

    def test_chain_stats(self):
        m = HashMap(1, 4)
        m._buckets[0] = [["a", 1]]
        m._buckets[3] = [["b", 2], ["c", 3], ["d", 4]]
        m._size = 4
        stats = demo.chain_stats(m)
        self.assertEqual(stats["capacity"], 4)
        self.assertEqual(stats["load"], 1.0)
        self.assertEqual(stats["max_chain"], 3)
        self.assertAlmostEqual(stats["mean_chain"], 2.0)
        self.assertEqual(stats["empty_buckets"], 2)


class TestDemoExamples(unittest.TestCase):
    def test_scenario(self):
        with redirect_stdout(io.StringIO()):
            m = demo.example_1_populate()
            self.assertEqual((m.length(), m.capacity), (12, 16))
            demo.example_2_overwrite(m)
            self.assertEqual(m.get("apple"), "dark red")
            self.assertEqual(m.get("dog"), "dark brown")
            self.assertEqual((m.length(), m.capacity), (12, 16))
            fig, m = demo.example_3_resize(m)
            plt.close(fig)
            self.assertEqual((m.length(), m.capacity), (13, 32))
            demo.example_4_remove_and_clear(m)
        self.assertEqual(m.length(), 0)
        self.assertEqual(m.capacity, 32)

    def test_distribution(self):
        with redirect_stdout(io.StringIO()):
            fig, m = demo.example_5_distribution(200)
        plt.close(fig)
        self.assertEqual(m.length(), 200)

    def test_main_without_plots(self):
        out = io.StringIO()
        with redirect_stdout(out):
            demo.main(["--no-plots"])
        self.assertIn("New capacity after resize: 32", out.getvalue())
        self.assertIn("DEMO COMPLETE", out.getvalue())


if __name__ == "__main__":
    unittest.main()
