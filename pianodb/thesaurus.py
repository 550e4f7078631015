"""PCID thesaurus: set-class metadata joined onto chord types.

The thesaurus is a tab-separated table with one row per set class::

    forte  carter  complement  prime_pcid  root_pcid  pcids  spacings

``pcids`` lists every PCID (every inversion) belonging to the set class, so
several PCIDs share one entry. A ``Thesaurus`` is an immutable handle built
once from that text; lookups go through a PCID-to-entry map.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from pianodb import config
from pianodb.analysis import (
    calculate_inversions,
    format_interval_vector,
    format_pitch_classes,
    interval_vector,
)
from pianodb.errors import MetadataUnavailable
from pianodb.models import Inversion
from pianodb.pitch_class import decode_pitch_classes, pcid_to_binary, present_pitches

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"

# forte, carter, complement, prime_pcid, root_pcid, pcids are required
MIN_COLUMNS = 6


@dataclass(frozen=True)
class ThesaurusEntry:
    """Set-class metadata for a group of PCIDs.

    Parameters
    ----------
    forte_number : str
        Forte set-class name (e.g., "3-11").
    carter_number : int | None
        Carter's chord number, if known.
    complement : str
        Forte name of the complementary set class.
    prime_pcid : int | None
        PCID of the prime form.
    root_pcid : int | None
        PCID of the conventional root position.
    pcids : tuple[int, ...]
        Every PCID in the set class.
    possible_spacings : str
        Free-text description of spacings.
    """

    forte_number: str
    carter_number: int | None
    complement: str
    prime_pcid: int | None
    root_pcid: int | None
    pcids: tuple[int, ...]
    possible_spacings: str


def parse_int_or_none(value: str | None) -> int | None:
    """Parse an integer column, treating blanks and junk as missing.

    Examples
    --------
    >>> parse_int_or_none(" 42 ")
    42
    >>> parse_int_or_none("")
    >>> parse_int_or_none("n/a")
    """
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_pcid_list(value: str | None) -> tuple[int, ...]:
    """Parse a comma-separated PCID list, dropping anything non-integer.

    Examples
    --------
    >>> parse_pcid_list("72, 132,272")
    (72, 132, 272)
    """
    if value is None or not value.strip():
        return ()
    pcids = (parse_int_or_none(part) for part in value.split(","))
    return tuple(pcid for pcid in pcids if pcid is not None)


def parse_thesaurus_row(columns: list[str]) -> ThesaurusEntry:
    """Build an entry from the columns of one row (at least ``MIN_COLUMNS``)."""
    return ThesaurusEntry(
        forte_number=columns[0].strip(),
        carter_number=parse_int_or_none(columns[1]),
        complement=columns[2].strip(),
        prime_pcid=parse_int_or_none(columns[3]),
        root_pcid=parse_int_or_none(columns[4]),
        pcids=parse_pcid_list(columns[5]),
        possible_spacings=columns[6].strip() if len(columns) > 6 else "",
    )


@dataclass(frozen=True)
class Thesaurus:
    """Read-only PCID thesaurus.

    Examples
    --------
    >>> text = "forte\\tcarter\\tcomplement\\tprime\\troot\\tpcids\\tspacings\\n"
    >>> text += "3-11\\t\\t9-11\\t68\\t72\\t72,132,272,68,80,264\\tclose, open\\n"
    >>> thesaurus = parse_thesaurus(text)
    >>> thesaurus.get(132).forte_number
    '3-11'
    >>> thesaurus.get(1) is None
    True
    """

    entries: tuple[ThesaurusEntry, ...]
    _by_pcid: dict[int, ThesaurusEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_pcid: dict[int, ThesaurusEntry] = {}
        for entry in self.entries:
            for pcid in entry.pcids:
                by_pcid[pcid] = entry
        object.__setattr__(self, "_by_pcid", by_pcid)

    def get(self, pcid: int) -> ThesaurusEntry | None:
        """Return the entry for ``pcid``, or None when no metadata exists."""
        return self._by_pcid.get(pcid)

    def __getitem__(self, pcid: int) -> ThesaurusEntry:
        entry = self._by_pcid.get(pcid)
        if entry is None:
            raise MetadataUnavailable(pcid)
        return entry

    def __contains__(self, pcid: object) -> bool:
        return pcid in self._by_pcid

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ThesaurusEntry]:
        return iter(self.entries)

    def forte_number(self, pcid: int) -> str | None:
        """Forte name of the set class containing ``pcid``."""
        entry = self.get(pcid)
        return entry.forte_number if entry else None

    def prime_form(self, pcid: int) -> str | None:
        """Prime form as ``[0 1 4]``, or None when it is unknown."""
        entry = self.get(pcid)
        if entry is None or entry.prime_pcid is None:
            return None
        return format_pitch_classes(decode_pitch_classes(entry.prime_pcid))


def parse_thesaurus(text: str) -> Thesaurus:
    """Parse thesaurus TSV text into a ``Thesaurus``.

    The header line is skipped, as are blank lines and rows with fewer than
    ``MIN_COLUMNS`` columns. Blank or non-numeric numeric fields become None.
    """
    entries: list[ThesaurusEntry] = []
    lines = text.replace("\r\n", "\n").split("\n")
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        columns = line.rstrip("\n").split("\t")
        if len(columns) < MIN_COLUMNS:
            logger.warning("Skipping thesaurus line %d: %d columns", line_number, len(columns))
            continue
        entries.append(parse_thesaurus_row(columns))
    return Thesaurus(entries=tuple(entries))


def load_thesaurus(path: str | Path) -> Thesaurus:
    """Load a thesaurus from a TSV file."""
    path = Path(path)
    thesaurus = parse_thesaurus(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d thesaurus entries from %s", len(thesaurus), path)
    return thesaurus


_default_lock = threading.Lock()
_default: Thesaurus | None = None


def default_thesaurus(path: str | Path | None = None) -> Thesaurus:
    """Return the process-wide thesaurus, loading it on first use.

    The file is read at most once, even under concurrent first calls. The
    path defaults to ``PIANODB_THESAURUS_PATH``.

    Raises
    ------
    FileNotFoundError
        If no path is configured or the file does not exist.
    """
    global _default
    if _default is not None:
        return _default
    with _default_lock:
        if _default is None:
            resolved = path if path is not None else config.THESAURUS_PATH
            if resolved is None:
                msg = "No thesaurus path configured (set PIANODB_THESAURUS_PATH)"
                raise FileNotFoundError(msg)
            _default = load_thesaurus(resolved)
    return _default


def reset_default_thesaurus() -> None:
    """Forget the process-wide thesaurus so the next call reloads it."""
    global _default
    with _default_lock:
        _default = None


@dataclass(frozen=True)
class PcidDescription:
    """A chord type's own analysis joined with its optional metadata."""

    pcid: int
    pitches: tuple[str, ...]
    binary: str
    interval_vector: str
    inversions: tuple[Inversion, ...]
    entry: ThesaurusEntry | None
    prime_form: str | None

    def display(self) -> dict[str, str]:
        """Flatten to display strings, using ``N/A`` for missing metadata."""
        entry = self.entry
        carter = entry.carter_number if entry else None
        return {
            "pcid": str(self.pcid),
            "pitches": " ".join(self.pitches),
            "binary": self.binary,
            "interval_vector": self.interval_vector,
            "forte_number": entry.forte_number if entry and entry.forte_number else NOT_AVAILABLE,
            "carter_number": str(carter) if carter is not None else NOT_AVAILABLE,
            "complement": entry.complement if entry and entry.complement else NOT_AVAILABLE,
            "prime_form": self.prime_form or NOT_AVAILABLE,
            "possible_spacings": entry.possible_spacings if entry and entry.possible_spacings else NOT_AVAILABLE,
        }


def describe(pcid: int, thesaurus: Thesaurus | None = None) -> PcidDescription:
    """Describe a chord type, joining thesaurus metadata when available.

    Parameters
    ----------
    pcid : int
        The chord type.
    thesaurus : Thesaurus | None
        Metadata source; without one every metadata field is missing.

    Raises
    ------
    PcidOutOfRange
        If ``pcid`` is outside 0-2047.
    """
    pitches = present_pitches(pcid)
    entry = thesaurus.get(pcid) if thesaurus is not None else None
    return PcidDescription(
        pcid=pcid,
        pitches=tuple(pitches),
        binary=pcid_to_binary(pcid),
        interval_vector=format_interval_vector(interval_vector(pcid)),
        inversions=tuple(calculate_inversions(pcid)),
        entry=entry,
        prime_form=thesaurus.prime_form(pcid) if thesaurus is not None else None,
    )
