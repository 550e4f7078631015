import random

import pytest

from pianodb import (
    DIGEST_ALPHABET,
    MAX_GAP,
    GapTooLarge,
    InvalidDigestCharacter,
    NotesNotAscending,
    decode_notes,
    encode_notes,
)
from pianodb.digest import is_valid_digest


class TestAlphabet:
    def test_alphabet_size(self):
        assert len(DIGEST_ALPHABET) == 69
        assert MAX_GAP == 69

    def test_alphabet_unique(self):
        assert len(set(DIGEST_ALPHABET)) == len(DIGEST_ALPHABET)

    def test_alphabet_prefix(self):
        assert DIGEST_ALPHABET.startswith("1234567890ABCDEF")

    def test_alphabet_safe_in_csv(self):
        assert "," not in DIGEST_ALPHABET
        assert "/" not in DIGEST_ALPHABET


class TestEncodeNotes:
    def test_major_triad(self):
        assert encode_notes([0, 4, 7]) == "43"

    def test_empty(self):
        assert encode_notes([]) == ""

    def test_single_note(self):
        assert encode_notes([5]) == ""

    def test_only_gaps_are_encoded(self):
        assert encode_notes([60, 64, 67]) == "43"

    def test_wide_gaps(self):
        assert encode_notes([0, 10, 11, 23]) == "01B"

    def test_largest_gap(self):
        assert encode_notes([0, MAX_GAP]) == DIGEST_ALPHABET[-1]

    def test_gap_too_large(self):
        with pytest.raises(GapTooLarge) as excinfo:
            encode_notes([0, 100])
        assert excinfo.value.gap == 100

    def test_gap_just_too_large(self):
        with pytest.raises(GapTooLarge):
            encode_notes([0, MAX_GAP + 1])

    def test_descending_raises(self):
        with pytest.raises(NotesNotAscending, match="ascending"):
            encode_notes([5, 3])

    def test_repeated_note_raises(self):
        with pytest.raises(NotesNotAscending):
            encode_notes([0, 4, 4])


class TestDecodeNotes:
    def test_major_triad(self):
        assert decode_notes("43") == [0, 4, 7]

    def test_empty(self):
        assert decode_notes("") == [0]

    def test_length(self):
        assert len(decode_notes("C79")) == 4

    def test_invalid_character(self):
        with pytest.raises(InvalidDigestCharacter) as excinfo:
            decode_notes("4,3")
        assert excinfo.value.char == ","
        assert excinfo.value.position == 1

    def test_order_sensitive(self):
        assert decode_notes("43") != decode_notes("34")
        assert decode_notes("34") == [0, 3, 7]

    def test_round_trip_random(self):
        rng = random.Random(1234)
        for _ in range(500):
            notes = [0]
            for _ in range(rng.randint(0, 10)):
                notes.append(notes[-1] + rng.randint(1, MAX_GAP))
            assert decode_notes(encode_notes(notes)) == notes


class TestIsValidDigest:
    def test_valid(self):
        assert is_valid_digest("43")
        assert is_valid_digest("")

    def test_invalid(self):
        assert not is_valid_digest("4 3")
