"""Chord-type search from a selection of notes.

A selection is reduced to a PCID and compared against every known chord
type. A candidate is an exact match when its PCID is equal, and a superset
match when it contains every pitch class of the selection.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from pianodb.models import PitchClassRecord
from pianodb.pitch_class import pcid_from_notes

MatchKind = Literal["exact", "superset"]

DEFAULT_SUPERSET_LIMIT = 10


@dataclass(frozen=True)
class SearchResult:
    """Matches for one selection.

    Parameters
    ----------
    pcid : int
        The PCID searched for.
    exact : tuple[PitchClassRecord, ...]
        Records whose PCID equals ``pcid``, in dataset order.
    supersets : tuple[PitchClassRecord, ...]
        The most frequent records containing ``pcid``, most frequent first.
    """

    pcid: int
    exact: tuple[PitchClassRecord, ...]
    supersets: tuple[PitchClassRecord, ...]

    @property
    def matches(self) -> tuple[PitchClassRecord, ...]:
        """Exact matches followed by superset matches."""
        return self.exact + self.supersets

    def match_kind(self, record: PitchClassRecord) -> MatchKind:
        """Classify a record from this result."""
        return "exact" if record.pcid == self.pcid else "superset"

    def __len__(self) -> int:
        return len(self.exact) + len(self.supersets)


def is_superset(user_pcid: int, candidate_pcid: int) -> bool:
    """Check whether ``candidate_pcid`` contains every pitch class of ``user_pcid``.

    A root-only selection (PCID 0) is contained in everything and so never
    counts as a superset query.

    Examples
    --------
    >>> is_superset(72, 200)
    True
    >>> is_superset(72, 8)
    False
    """
    return user_pcid != 0 and (user_pcid & candidate_pcid) == user_pcid


def find_matches(
    user_pcid: int,
    records: Iterable[PitchClassRecord],
    limit: int = DEFAULT_SUPERSET_LIMIT,
) -> SearchResult:
    """Classify known chord types against a PCID.

    Parameters
    ----------
    user_pcid : int
        The PCID of the selection.
    records : Iterable[PitchClassRecord]
        Every known chord type.
    limit : int
        Maximum number of superset matches kept (exact matches are never cut).

    Returns
    -------
    SearchResult
        Exact matches, then superset matches ranked by frequency.
    """
    exact: list[PitchClassRecord] = []
    supersets: list[PitchClassRecord] = []
    for record in records:
        if record.pcid == user_pcid:
            exact.append(record)
        elif is_superset(user_pcid, record.pcid):
            supersets.append(record)

    supersets.sort(key=lambda record: record.frequency, reverse=True)
    return SearchResult(pcid=user_pcid, exact=tuple(exact), supersets=tuple(supersets[:limit]))


def search_notes(
    notes: Sequence[int],
    records: Iterable[PitchClassRecord],
    limit: int = DEFAULT_SUPERSET_LIMIT,
) -> SearchResult:
    """Search chord types from absolute notes, such as clicked piano keys.

    The lowest note becomes the root. An empty selection matches nothing.
    """
    if not notes:
        return SearchResult(pcid=0, exact=(), supersets=())
    return find_matches(pcid_from_notes(notes), records, limit=limit)
