"""
Tests for per-context character distributions.
"""

import unittest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from char_lm.distribution import CharRecord, ContextDistribution, IndexOutOfRange


class TestCharRecord(unittest.TestCase):
    """Tests for CharRecord."""

    def test_defaults(self):
        """A fresh record has been seen once and has no probability yet."""
        rec = CharRecord('x')
        self.assertEqual(rec.count, 1)
        self.assertEqual(rec.probability, 0.0)
        self.assertEqual(rec.cumulative_probability, 0.0)

    def test_str(self):
        rec = CharRecord('x', count=2, probability=0.5, cumulative_probability=1.0)
        self.assertEqual(str(rec), "x 2 0.5 1.0")


class TestRecordOccurrence(unittest.TestCase):
    """Tests for count updates."""

    def setUp(self):
        self.dist = ContextDistribution()

    def test_new_characters_go_to_front(self):
        """Newly observed characters are inserted at the front."""
        for ch in "abc":
            self.dist.record_occurrence(ch)
        self.assertEqual([rec.character for rec in self.dist], ['c', 'b', 'a'])

    def test_existing_character_is_incremented(self):
        """Repeated characters increment instead of duplicating."""
        for ch in "abab a":
            self.dist.record_occurrence(ch)
        self.assertEqual(len(self.dist), 3)
        self.assertEqual(self.dist.find('a').count, 3)
        self.assertEqual(self.dist.find('b').count, 2)
        self.assertEqual(self.dist.find(' ').count, 1)
        self.assertEqual(self.dist.total_count(), 6)

    def test_order_unchanged_by_increment(self):
        for ch in "abba":
            self.dist.record_occurrence(ch)
        self.assertEqual([rec.character for rec in self.dist], ['b', 'a'])


class TestProbabilities(unittest.TestCase):
    """Tests for probability recomputation."""

    def setUp(self):
        self.dist = ContextDistribution()
        for ch in "aab":
            self.dist.record_occurrence(ch)
        self.dist.recompute_probabilities()

    def test_probabilities(self):
        """Probabilities follow counts; cumulative follows iteration order."""
        b, a = self.dist.to_list()
        self.assertEqual(b.character, 'b')
        self.assertAlmostEqual(b.probability, 1 / 3)
        self.assertAlmostEqual(b.cumulative_probability, 1 / 3)
        self.assertAlmostEqual(a.probability, 2 / 3)
        self.assertAlmostEqual(a.cumulative_probability, 1.0)

    def test_sum_to_one(self):
        for ch in "the quick brown fox jumps over the lazy dog":
            self.dist.record_occurrence(ch)
        self.dist.recompute_probabilities()
        self.assertAlmostEqual(sum(rec.probability for rec in self.dist), 1.0, delta=1e-9)
        cps = [rec.cumulative_probability for rec in self.dist]
        self.assertEqual(cps, sorted(cps))
        self.assertAlmostEqual(cps[-1], 1.0, delta=1e-9)

    def test_recompute_empty_is_noop(self):
        empty = ContextDistribution()
        empty.recompute_probabilities()
        self.assertEqual(len(empty), 0)

    def test_str(self):
        dist = ContextDistribution()
        dist.record_occurrence('a')
        dist.record_occurrence('b')
        dist.recompute_probabilities()
        self.assertEqual(str(dist), "(b 1 0.5 0.5 a 1 0.5 1.0)")


class TestSample(unittest.TestCase):
    """Tests for threshold-crossing sampling."""

    def setUp(self):
        self.dist = ContextDistribution()
        for ch in "aab":
            self.dist.record_occurrence(ch)
        self.dist.recompute_probabilities()

    def test_first_crossing(self):
        """The first record whose cumulative probability exceeds the value wins."""
        self.assertEqual(self.dist.sample(0.0), 'b')
        self.assertEqual(self.dist.sample(0.3), 'b')
        self.assertEqual(self.dist.sample(0.34), 'a')
        self.assertEqual(self.dist.sample(0.999999), 'a')

    def test_out_of_range_value(self):
        with self.assertRaises(ValueError):
            self.dist.sample(1.0)
        with self.assertRaises(ValueError):
            self.dist.sample(-0.1)

    def test_empty_distribution(self):
        with self.assertRaises(ValueError):
            ContextDistribution().sample(0.5)

    def test_rounding_falls_back_to_last(self):
        """A final cumulative value just under 1.0 still yields a character."""
        self.dist.get(1).cumulative_probability = 0.9999999
        self.assertEqual(self.dist.sample(0.99999999), 'a')

    def test_sample_sees_new_counts(self):
        """Updates after a recomputation are reflected by the next sample."""
        dist = ContextDistribution()
        dist.record_occurrence('a')
        dist.recompute_probabilities()
        dist.record_occurrence('b')
        self.assertEqual(dist.sample(0.2), 'b')
        self.assertEqual(dist.sample(0.7), 'a')

    def test_sample_after_remove(self):
        self.assertTrue(self.dist.remove('b'))
        self.assertEqual(self.dist.sample(0.0), 'a')
        self.assertEqual(self.dist.find('a').cumulative_probability, 1.0)

    def test_records_read_after_update_are_current(self):
        self.dist.record_occurrence('b')
        b, a = self.dist.to_list()
        self.assertAlmostEqual(b.probability, 0.5)
        self.assertAlmostEqual(a.cumulative_probability, 1.0)


class TestLookupAndRemoval(unittest.TestCase):
    """Tests for find, index_of, remove and positional access."""

    def setUp(self):
        self.dist = ContextDistribution()
        for ch in "xyz":
            self.dist.record_occurrence(ch)

    def test_find(self):
        self.assertEqual(self.dist.find('y').character, 'y')
        self.assertIsNone(self.dist.find('q'))
        self.assertIn('x', self.dist)
        self.assertNotIn('q', self.dist)

    def test_index_of(self):
        self.assertEqual(self.dist.index_of('z'), 0)
        self.assertEqual(self.dist.index_of('x'), 2)
        self.assertEqual(self.dist.index_of('q'), -1)

    def test_remove(self):
        self.assertTrue(self.dist.remove('y'))
        self.assertFalse(self.dist.remove('y'))
        self.assertEqual([rec.character for rec in self.dist], ['z', 'x'])
        self.assertIsNone(self.dist.find('y'))

    def test_readd_after_remove(self):
        self.dist.remove('x')
        self.dist.record_occurrence('x')
        self.assertEqual(self.dist.index_of('x'), 0)
        self.assertEqual(self.dist.find('x').count, 1)

    def test_positional_access(self):
        self.assertEqual(self.dist.get(0).character, 'z')
        self.assertEqual(self.dist[2].character, 'x')

    def test_index_out_of_range(self):
        """Indexes outside [0, size) raise IndexOutOfRange."""
        for index in (-1, 3, 100):
            with self.assertRaises(IndexOutOfRange):
                self.dist.get(index)
        with self.assertRaises(IndexError):
            self.dist[-1]
        with self.assertRaises(IndexOutOfRange):
            ContextDistribution().get(0)


if __name__ == '__main__':
    unittest.main()
