"""Dataset CSV parsing.

Dataset slices are plain CSV text: a header line followed by rows of
``frequency,duration,digest`` (one chord type's voicings) or
``frequency,duration,pcid`` (the chord-type table). Rows are parsed into
typed records field by field. A malformed row is logged and dropped so the
rest of the dataset still loads.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

import numpy as np

from pianodb.digest import is_valid_digest
from pianodb.errors import MalformedRecord
from pianodb.models import PitchClassRecord, VoicingRecord
from pianodb.pitch_class import MAX_PCID

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _split(line: str, expected: int, line_number: int | None) -> list[str]:
    fields = [field.strip() for field in line.strip().split(",")]
    if len(fields) != expected:
        raise MalformedRecord(f"expected {expected} fields, got {len(fields)}", line, line_number)
    return fields


def _parse_int(value: str, name: str, line: str, line_number: int | None) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedRecord(f"{name} is not an integer: {value!r}", line, line_number) from None


def _parse_float(value: str, name: str, line: str, line_number: int | None) -> float:
    try:
        result = float(value)
    except ValueError:
        raise MalformedRecord(f"{name} is not a number: {value!r}", line, line_number) from None
    if not math.isfinite(result):
        raise MalformedRecord(f"{name} is not finite: {value!r}", line, line_number)
    return result


def parse_voicing_row(line: str, legacy: bool = False, line_number: int | None = None) -> VoicingRecord:
    """Parse one voicing row.

    Parameters
    ----------
    line : str
        A ``frequency,duration,digest`` row, or with ``legacy`` set, a
        ``voicing_id,frequency,duration,digest`` row.
    legacy : bool
        Read the four-column layout with a leading numeric voicing id.
    line_number : int | None
        1-based line number, used in error messages.

    Returns
    -------
    VoicingRecord
        The parsed record.

    Raises
    ------
    MalformedRecord
        If the field count is wrong, a numeric field does not parse, or the
        digest contains characters outside the digest alphabet.

    Examples
    --------
    >>> parse_voicing_row("120,35.5,43")
    VoicingRecord(frequency=120, duration=35.5, digest='43', voicing_id=None)
    """
    voicing_id = None
    if legacy:
        raw_id, frequency, duration, digest = _split(line, 4, line_number)
        voicing_id = _parse_int(raw_id, "voicing_id", line, line_number)
    else:
        frequency, duration, digest = _split(line, 3, line_number)

    if not digest or not is_valid_digest(digest):
        raise MalformedRecord(f"invalid digest: {digest!r}", line, line_number)

    return VoicingRecord(
        frequency=_parse_int(frequency, "frequency", line, line_number),
        duration=_parse_float(duration, "duration", line, line_number),
        digest=digest,
        voicing_id=voicing_id,
    )


def parse_pitch_class_row(line: str, rank: int, line_number: int | None = None) -> PitchClassRecord:
    """Parse one ``frequency,duration,pcid`` row.

    Raises
    ------
    MalformedRecord
        If the field count is wrong, a numeric field does not parse, or the
        PCID is outside 0-2047.

    Examples
    --------
    >>> parse_pitch_class_row("9000,1234.5,72", rank=1)
    PitchClassRecord(frequency=9000, duration=1234.5, pcid=72, rank=1)
    """
    frequency, duration, raw_pcid = _split(line, 3, line_number)
    pcid = _parse_int(raw_pcid, "pcid", line, line_number)
    if not 0 <= pcid <= MAX_PCID:
        raise MalformedRecord(f"pcid out of range: {pcid}", line, line_number)
    return PitchClassRecord(
        frequency=_parse_int(frequency, "frequency", line, line_number),
        duration=_parse_float(duration, "duration", line, line_number),
        pcid=pcid,
        rank=rank,
    )


def _data_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every non-blank line after the header."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    for line_number, line in enumerate(text.split("\n")[1:], start=2):
        if line.strip():
            yield line_number, line


def _parse_rows(text: str, parse_row: Callable[[str, int, int], R]) -> list[R]:
    records: list[R] = []
    skipped = 0
    for line_number, line in _data_lines(text):
        try:
            records.append(parse_row(line, len(records) + 1, line_number))
        except MalformedRecord as e:
            skipped += 1
            logger.warning("Skipping %s", e)
    if skipped:
        logger.info("Parsed %d records, skipped %d malformed rows", len(records), skipped)
    return records


def parse_voicing_csv(text: str, legacy: bool = False) -> list[VoicingRecord]:
    """Parse a chord type's voicing CSV, dropping malformed rows.

    Examples
    --------
    >>> records = parse_voicing_csv("frequency,duration,digest\\n10,2.5,43\\nbad\\n4,1.0,34\\n")
    >>> [r.digest for r in records]
    ['43', '34']
    """
    return _parse_rows(
        text,
        lambda line, _position, line_number: parse_voicing_row(line, legacy=legacy, line_number=line_number),
    )


def parse_pitch_class_csv(text: str) -> list[PitchClassRecord]:
    """Parse the chord-type CSV, dropping malformed rows.

    ``rank`` is the 1-based position among the accepted rows, so the file's
    own popularity ordering is preserved.
    """
    return _parse_rows(
        text,
        lambda line, position, line_number: parse_pitch_class_row(line, rank=position, line_number=line_number),
    )


def _shares(values: Sequence[float]) -> list[float]:
    array = np.asarray(values, dtype=np.float64)
    total = array.sum()
    if total == 0:
        return [0.0] * len(array)
    return (array / total * 100.0).tolist()


def frequency_shares(records: Sequence[VoicingRecord | PitchClassRecord]) -> list[float]:
    """Each record's frequency as a percentage of the dataset total.

    Examples
    --------
    >>> recs = parse_pitch_class_csv("h\\n3,1.0,72\\n1,3.0,8\\n")
    >>> frequency_shares(recs)
    [75.0, 25.0]
    """
    return _shares([record.frequency for record in records])


def duration_shares(records: Sequence[VoicingRecord | PitchClassRecord]) -> list[float]:
    """Each record's duration as a percentage of the dataset total."""
    return _shares([record.duration for record in records])


def rank_of(pcid: int, records: Sequence[PitchClassRecord]) -> int | None:
    """Popularity rank of a chord type, or None if it is not in the dataset."""
    for record in records:
        if record.pcid == pcid:
            return record.rank
    return None
