"""Voicing digests.

A digest encodes a strictly ascending list of note offsets as the gaps
between consecutive notes, one alphabet symbol per gap. The first note is
implicitly at offset 0, so ``"43"`` is the root-position triad ``[0, 4, 7]``.
"""

from __future__ import annotations

from collections.abc import Sequence

from pianodb.errors import GapTooLarge, InvalidDigestCharacter, NotesNotAscending

# Symbol n (1-based) encodes a gap of n semitones. The first 66 symbols are
# the unreserved URL characters used by the published dataset; the last three
# extend the range and stay safe in CSV fields and URL path segments.
DIGEST_ALPHABET = "1234567890ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-._~!$@"

MAX_GAP = len(DIGEST_ALPHABET)

_SYMBOL_TO_GAP: dict[str, int] = {symbol: index + 1 for index, symbol in enumerate(DIGEST_ALPHABET)}


def encode_notes(notes: Sequence[int]) -> str:
    """Pack ascending notes into a digest.

    Parameters
    ----------
    notes : Sequence[int]
        Strictly ascending note offsets. Only the gaps are encoded, so the
        first note's absolute value is lost.

    Returns
    -------
    str
        The digest; empty for an empty (or single-note) input.

    Raises
    ------
    NotesNotAscending
        If a note is not greater than the one before it.
    GapTooLarge
        If two consecutive notes are more than ``MAX_GAP`` semitones apart.

    Examples
    --------
    >>> encode_notes([0, 4, 7])
    '43'
    >>> encode_notes([0, 12, 19, 28])
    'B79'
    """
    symbols: list[str] = []
    for index in range(1, len(notes)):
        previous, note = notes[index - 1], notes[index]
        gap = note - previous
        if gap <= 0:
            raise NotesNotAscending(index, previous, note)
        if gap > MAX_GAP:
            raise GapTooLarge(gap, MAX_GAP)
        symbols.append(DIGEST_ALPHABET[gap - 1])
    return "".join(symbols)


def decode_notes(digest: str) -> list[int]:
    """Unpack a digest into note offsets, starting at 0.

    Parameters
    ----------
    digest : str
        The digest string.

    Returns
    -------
    list[int]
        ``len(digest) + 1`` ascending offsets.

    Raises
    ------
    InvalidDigestCharacter
        If a character is not in the alphabet.

    Examples
    --------
    >>> decode_notes("43")
    [0, 4, 7]
    >>> decode_notes("")
    [0]
    """
    current = 0
    notes = [0]
    for position, char in enumerate(digest):
        gap = _SYMBOL_TO_GAP.get(char)
        if gap is None:
            raise InvalidDigestCharacter(char, position)
        current += gap
        notes.append(current)
    return notes


def is_valid_digest(digest: str) -> bool:
    """Return True if every character of ``digest`` is in the alphabet."""
    return all(char in _SYMBOL_TO_GAP for char in digest)
