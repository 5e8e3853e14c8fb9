from apps.stats.streaks import scan_runs


def consecutive(previous, item):
    return item == previous + 1


class TestScanRuns:
    """Tests for the generic run scan."""

    def test_empty(self):
        scan = scan_runs([], consecutive)

        assert scan.longest is None
        assert scan.last is None

    def test_single_item(self):
        scan = scan_runs([5], consecutive)

        assert scan.longest.length == 1
        assert scan.last == scan.longest

    def test_longest_and_last(self):
        scan = scan_runs([1, 2, 3, 7, 8], consecutive)

        assert (scan.longest.start, scan.longest.length) == (0, 3)
        assert (scan.longest.first, scan.longest.last) == (1, 3)
        assert (scan.last.start, scan.last.length) == (3, 2)
        assert (scan.last.first, scan.last.last) == (7, 8)

    def test_earliest_run_wins_ties(self):
        scan = scan_runs([1, 2, 10, 11], consecutive)

        assert scan.longest.first == 1
        assert scan.last.first == 10

    def test_predicate_sees_previous_item(self):
        """The predicate compares against the previous item, not the run's first."""
        scan = scan_runs(['a', 'a', 'b', 'b', 'b'], lambda previous, item: previous == item)

        assert scan.longest.first == 'b'
        assert scan.longest.length == 3

    def test_accepts_iterator(self):
        scan = scan_runs(iter([1, 2, 3]), consecutive)

        assert scan.last.length == 3
