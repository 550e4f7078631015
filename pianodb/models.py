"""Data models for pianodb.

Decoded voicings, inversions, dataset records and chord symbols. All of
them are immutable values recomputed from their inputs on demand.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordSymbol:
    """A named chord.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    quality : str
        The chord quality in Harte notation (e.g., "maj", "min7", "dim").
    bass : str | None
        The bass note if different from root (for slash chords).

    Examples
    --------
    >>> chord = ChordSymbol(root="G", quality="min7")
    >>> chord.to_harte()
    'G:min7'
    >>> chord.to_pychord()
    'Gm7'
    """

    root: str
    quality: str
    bass: str | None = None

    def to_harte(self) -> str:
        """Convert to Harte notation string (e.g., "G:min7", "C:maj/E")."""
        result = f"{self.root}:{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def to_pychord(self) -> str:
        """Convert to pychord notation string (e.g., "Gm7", "C/E")."""
        from pianodb.naming import harte_quality_to_pychord

        result = f"{self.root}{harte_quality_to_pychord(self.quality)}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def __str__(self) -> str:
        """Return Harte notation as default string representation."""
        return self.to_harte()


@dataclass(frozen=True)
class Inversion:
    """A chord type re-rooted at one of its members.

    Parameters
    ----------
    pcid : int
        PCID of the re-rooted set.
    index : int
        Position of the new root in the original decoded pitch classes.
    root_name : str
        Pitch-class name of the new root, relative to the original root on C.
    """

    pcid: int
    index: int
    root_name: str


@dataclass(frozen=True)
class NoteInfo:
    """Everything derived from decoding a digest.

    Parameters
    ----------
    notes : tuple[int, ...]
        Bass-relative offsets, starting at 0.
    note_names : tuple[str, ...]
        Names with octave after applying the octave shift (e.g., "C3").
    pitch_classes : tuple[int, ...]
        Distinct ``note % 12`` values, ascending.
    lowest : int
        Lowest offset.
    highest : int
        Highest offset.
    span : int
        Semitones between the extremes.
    """

    notes: tuple[int, ...]
    note_names: tuple[str, ...]
    pitch_classes: tuple[int, ...]
    lowest: int
    highest: int
    span: int


@dataclass(frozen=True)
class VoicingAnalysis:
    """Human-facing summary of a voicing."""

    note_count: int
    note_names: tuple[str, ...]
    pitch_classes: tuple[str, ...]
    span: str
    intervals: tuple[int, ...]
    interval_names: tuple[str, ...]


@dataclass(frozen=True)
class VoicingRecord:
    """One voicing row of a chord-type dataset.

    Parameters
    ----------
    frequency : int
        Number of occurrences in the corpus.
    duration : float
        Cumulative sustain time.
    digest : str
        The voicing digest.
    voicing_id : int | None
        Numeric id from the legacy four-column layout.
    """

    frequency: int
    duration: float
    digest: str
    voicing_id: int | None = None


@dataclass(frozen=True)
class PitchClassRecord:
    """One chord-type row of the pitch-class dataset.

    Parameters
    ----------
    frequency : int
        Number of occurrences in the corpus.
    duration : float
        Cumulative sustain time.
    pcid : int
        The chord type.
    rank : int
        1-based popularity rank (file order).
    """

    frequency: int
    duration: float
    pcid: int
    rank: int
