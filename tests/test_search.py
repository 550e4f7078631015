import pytest

from pianodb import PitchClassRecord, find_matches, search_notes
from pianodb.search import is_superset


def record(pcid: int, frequency: int, rank: int = 0) -> PitchClassRecord:
    return PitchClassRecord(frequency=frequency, duration=float(frequency), pcid=pcid, rank=rank)


@pytest.fixture
def dataset() -> list[PitchClassRecord]:
    return [
        record(72, 900, 1),  # major triad
        record(200, 500, 2),  # 72 | 128
        record(8, 400, 3),  # root + minor third only
        record(584, 300, 4),  # 72 | 512 (dominant seventh)
        record(580, 200, 5),  # minor seventh
    ]


class TestIsSuperset:
    def test_superset(self):
        assert is_superset(72, 200)

    def test_not_superset(self):
        assert not is_superset(72, 8)

    def test_equal_counts_as_superset(self):
        assert is_superset(72, 72)

    def test_root_only_query(self):
        assert not is_superset(0, 200)


class TestFindMatches:
    def test_exact_and_supersets(self, dataset):
        result = find_matches(72, dataset)
        assert [r.pcid for r in result.exact] == [72]
        assert [r.pcid for r in result.supersets] == [200, 584]
        assert [r.pcid for r in result.matches] == [72, 200, 584]

    def test_match_kind(self, dataset):
        result = find_matches(72, dataset)
        assert result.match_kind(result.matches[0]) == "exact"
        assert result.match_kind(result.matches[1]) == "superset"

    def test_supersets_ranked_by_frequency(self):
        records = [record(584, 10), record(200, 50), record(2047, 30)]
        result = find_matches(72, records)
        assert [r.pcid for r in result.supersets] == [200, 2047, 584]

    def test_superset_limit(self):
        records = [record(72 | (1 << bit), 100 + bit) for bit in range(11) if not (72 >> bit) & 1]
        records += [record(2047, 1), record(1023, 2), record(1535, 3)]
        result = find_matches(72, records)
        assert len(result.supersets) == 10
        assert result.supersets[0].frequency == max(r.frequency for r in records)

    def test_exact_matches_never_truncated(self):
        records = [record(72, n) for n in range(15)]
        result = find_matches(72, records, limit=3)
        assert len(result.exact) == 15
        assert len(result) == 15

    def test_root_only_query_has_no_supersets(self, dataset):
        result = find_matches(0, dataset + [record(0, 1)])
        assert [r.pcid for r in result.exact] == [0]
        assert result.supersets == ()


class TestSearchNotes:
    def test_major_triad_selection(self, dataset):
        result = search_notes([60, 64, 67], dataset)
        assert result.pcid == 72
        assert [r.pcid for r in result.exact] == [72]

    def test_selection_spread_over_octaves(self, dataset):
        result = search_notes([48, 64, 79], dataset)
        assert result.pcid == 72

    def test_empty_selection(self, dataset):
        result = search_notes([], dataset)
        assert result.matches == ()
