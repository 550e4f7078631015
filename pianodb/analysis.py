"""Analyses derived from decoded PCIDs and digests.

Nothing here keeps state; every result is a pure function of a PCID or a
digest and is recomputed on demand.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

import numpy as np

from pianodb.digest import decode_notes
from pianodb.models import Inversion, NoteInfo, VoicingAnalysis
from pianodb.pitch_class import (
    PITCH_CLASS_NAMES,
    decode_pitch_classes,
    encode_pitch_classes,
    pitch_class_name,
)

# Digest offsets are bass-relative; this shift puts offset 0 on note 48 (C3).
DEFAULT_OCTAVE_SHIFT = 48

INTERVAL_NAMES: dict[int, str] = {
    1: "min2",
    2: "maj2",
    3: "min3",
    4: "maj3",
    5: "P4",
    6: "tritone",
    7: "P5",
    8: "min6",
    9: "maj6",
    10: "min7",
    11: "maj7",
    12: "octave",
}


def note_name(note: int) -> str:
    """Name an absolute (MIDI-style) note number.

    Examples
    --------
    >>> note_name(60)
    'C4'
    >>> note_name(49)
    'Db3'
    """
    return f"{PITCH_CLASS_NAMES[note % 12]}{note // 12 - 1}"


def to_absolute(notes: Iterable[int], octave_shift: int = DEFAULT_OCTAVE_SHIFT) -> list[int]:
    """Shift bass-relative offsets into absolute note numbers."""
    return [note + octave_shift for note in notes]


def digest_pitch_classes(notes: Iterable[int]) -> list[int]:
    """Project notes onto their distinct pitch classes, ascending.

    Examples
    --------
    >>> digest_pitch_classes([0, 7, 16, 24])
    [0, 4, 7]
    """
    return sorted({note % 12 for note in notes})


def span(notes: Sequence[int]) -> int:
    """Semitones between the lowest and highest note (0 when empty)."""
    if not notes:
        return 0
    return max(notes) - min(notes)


def notes_from_digest(digest: str, octave_shift: int = DEFAULT_OCTAVE_SHIFT) -> NoteInfo:
    """Decode a digest and derive its note information.

    Parameters
    ----------
    digest : str
        The voicing digest.
    octave_shift : int
        Added to every offset before naming.

    Returns
    -------
    NoteInfo
        Notes, names, pitch classes and range of the voicing.

    Examples
    --------
    >>> info = notes_from_digest("43")
    >>> info.note_names
    ('C3', 'E3', 'G3')
    >>> info.span
    7
    """
    notes = decode_notes(digest)
    return NoteInfo(
        notes=tuple(notes),
        note_names=tuple(note_name(note) for note in to_absolute(notes, octave_shift)),
        pitch_classes=tuple(digest_pitch_classes(notes)),
        lowest=min(notes),
        highest=max(notes),
        span=span(notes),
    )


def interval_name(semitones: int) -> str:
    """Short name of an interval, falling back to ``"<n>st"``."""
    return INTERVAL_NAMES.get(semitones, f"{semitones}st")


def analyze_voicing(digest: str, octave_shift: int = DEFAULT_OCTAVE_SHIFT) -> VoicingAnalysis:
    """Summarise a voicing: note names, pitch classes and stacked intervals.

    Examples
    --------
    >>> analyze_voicing("43").interval_names
    ('maj3', 'min3')
    """
    info = notes_from_digest(digest, octave_shift)
    intervals = tuple(b - a for a, b in zip(info.notes, info.notes[1:]))
    return VoicingAnalysis(
        note_count=len(info.notes),
        note_names=info.note_names,
        pitch_classes=tuple(PITCH_CLASS_NAMES[pc] for pc in info.pitch_classes),
        span=f"{info.span} semitones",
        intervals=intervals,
        interval_names=tuple(interval_name(interval) for interval in intervals),
    )


def voicing_pcid(digest: str) -> int:
    """Chord type (PCID) realised by a voicing, relative to its bass."""
    return encode_pitch_classes(digest_pitch_classes(decode_notes(digest)))


def calculate_inversions(pcid: int) -> list[Inversion]:
    """Re-root a chord type at each of its members.

    Inversions are listed in ascending order of the new root, so the first
    entry is always the identity inversion of ``pcid`` itself.

    Parameters
    ----------
    pcid : int
        The chord type.

    Returns
    -------
    list[Inversion]
        One entry per member of the decoded pitch-class set.

    Examples
    --------
    >>> [inv.pcid for inv in calculate_inversions(72)]
    [72, 132, 272]
    >>> [inv.root_name for inv in calculate_inversions(72)]
    ['C', 'E', 'G']
    """
    pitch_classes = decode_pitch_classes(pcid)
    inversions = []
    for index, root in enumerate(pitch_classes):
        rerooted = [(pc - root) % 12 for pc in pitch_classes]
        inversions.append(
            Inversion(
                pcid=encode_pitch_classes(rerooted),
                index=index,
                root_name=pitch_class_name(root),
            )
        )
    return inversions


def interval_vector(chord: int | Iterable[int]) -> tuple[int, ...]:
    """Count the interval classes 1-6 between all pairs of pitch classes.

    Parameters
    ----------
    chord : int | Iterable[int]
        A PCID, or an explicit collection of pitch classes (0-11).

    Returns
    -------
    tuple[int, ...]
        Six counts; slot ``k - 1`` holds the pairs at interval class ``k``.

    Examples
    --------
    >>> interval_vector(72)
    (0, 0, 1, 1, 1, 0)
    >>> interval_vector([0, 4, 8])
    (0, 0, 0, 3, 0, 0)
    """
    if isinstance(chord, (int, np.integer)):
        pitch_classes = decode_pitch_classes(int(chord))
    else:
        pitch_classes = sorted({pc % 12 for pc in chord})
    classes = [min(d, 12 - d) for d in (abs(a - b) for a, b in combinations(pitch_classes, 2))]
    counts = np.bincount(np.asarray(classes, dtype=np.int64), minlength=7)
    return tuple(int(count) for count in counts[1:7])


def format_interval_vector(vector: Iterable[int]) -> str:
    """Render an interval vector as ``<a,b,c,d,e,f>``."""
    return f"<{','.join(str(count) for count in vector)}>"


def format_pitch_classes(pitch_classes: Iterable[int]) -> str:
    """Render pitch classes as ``[0 4 7]``."""
    return f"[{' '.join(str(pc) for pc in pitch_classes)}]"
