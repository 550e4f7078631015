import pytest

from pianodb import (
    InvalidPitchClass,
    PcidOutOfRange,
    decode_pitch_classes,
    encode_pitch_classes,
    pcid_from_notes,
    pitch_class_name,
    present_pitches,
)
from pianodb.pitch_class import (
    note_to_pc,
    pcid_to_binary,
    pitch_class_table,
    spell_pitch_classes,
    transpose_pitch_classes,
)


class TestEncodePitchClasses:
    def test_major_triad(self):
        assert encode_pitch_classes({0, 4, 7}) == 72

    def test_root_is_implicit(self):
        assert encode_pitch_classes({4, 7}) == encode_pitch_classes({0, 4, 7})

    def test_empty_is_root_only(self):
        assert encode_pitch_classes([]) == 0

    def test_duplicates_ignored(self):
        assert encode_pitch_classes([4, 4, 7, 7, 0]) == 72

    def test_all_pitch_classes(self):
        assert encode_pitch_classes(range(12)) == 2047

    @pytest.mark.parametrize("value", [-1, 12, 100])
    def test_out_of_range_raises(self, value):
        with pytest.raises(InvalidPitchClass, match="range 0-11"):
            encode_pitch_classes([0, value])

    def test_invalid_pitch_class_is_value_error(self):
        with pytest.raises(ValueError):
            encode_pitch_classes([13])


class TestDecodePitchClasses:
    def test_root_only(self):
        assert decode_pitch_classes(0) == [0]

    def test_major_triad(self):
        assert decode_pitch_classes(72) == [0, 4, 7]

    def test_full_set(self):
        assert decode_pitch_classes(2047) == list(range(12))

    @pytest.mark.parametrize("pcid", [-1, 2048])
    def test_out_of_range_raises(self, pcid):
        with pytest.raises(PcidOutOfRange):
            decode_pitch_classes(pcid)

    def test_round_trip_all_pcids(self):
        for pcid in range(2048):
            assert encode_pitch_classes(decode_pitch_classes(pcid)) == pcid

    def test_root_first_and_ascending(self):
        for pcid in range(2048):
            pcs = decode_pitch_classes(pcid)
            assert pcs[0] == 0
            assert pcs == sorted(set(pcs))


class TestNames:
    def test_pitch_class_name(self):
        assert pitch_class_name(0) == "C"
        assert pitch_class_name(6) == "Gb"
        assert pitch_class_name(11) == "B"

    def test_pitch_class_name_out_of_range(self):
        with pytest.raises(InvalidPitchClass):
            pitch_class_name(12)

    def test_note_to_pc(self):
        assert note_to_pc("F#") == 6
        assert note_to_pc("Bb") == 10
        assert note_to_pc("B#") == 0

    def test_unknown_note_raises(self):
        with pytest.raises(ValueError, match="Unknown note"):
            note_to_pc("H")


class TestSpelling:
    def test_gb_respelled_when_g_present(self):
        assert spell_pitch_classes([0, 6, 7]) == ["C", "F#", "G"]

    def test_gb_respelled_when_a_present(self):
        assert spell_pitch_classes([0, 2, 6, 9]) == ["C", "D", "F#", "A"]

    def test_gb_kept_otherwise(self):
        assert spell_pitch_classes([0, 3, 6]) == ["C", "Eb", "Gb"]

    def test_present_pitches_pretty(self):
        # C D F# A: 2, 6, 9 -> bits 1, 5, 8
        pcid = encode_pitch_classes([0, 2, 6, 9])
        assert present_pitches(pcid) == ["C", "D", "F#", "A"]
        assert present_pitches(pcid, pretty=False) == ["C", "D", "Gb", "A"]

    def test_spelling_does_not_change_pcid(self):
        pcid = encode_pitch_classes([0, 6, 7])
        assert encode_pitch_classes(decode_pitch_classes(pcid)) == pcid


class TestHelpers:
    def test_binary(self):
        assert pcid_to_binary(72) == "00001001000"
        assert pcid_to_binary(0) == "0" * 11
        assert pcid_to_binary(2047) == "1" * 11

    def test_binary_out_of_range(self):
        with pytest.raises(PcidOutOfRange):
            pcid_to_binary(4096)

    def test_pitch_class_table(self):
        table = pitch_class_table(72)
        assert len(table) == 12
        assert [row.semitone for row in table if row.present] == [0, 4, 7]
        assert table[4].name == "E"

    def test_transpose(self):
        assert transpose_pitch_classes([0, 4, 7], 2) == [2, 6, 9]
        assert transpose_pitch_classes([0, 4, 7], -4) == [0, 3, 8]


class TestPcidFromNotes:
    def test_root_position(self):
        assert pcid_from_notes([60, 64, 67]) == 72

    def test_order_irrelevant(self):
        assert pcid_from_notes([67, 60, 64]) == 72

    def test_octave_doublings(self):
        assert pcid_from_notes([48, 60, 64, 67, 76]) == 72

    def test_lowest_note_is_root(self):
        # E G C -> 0 3 8
        assert pcid_from_notes([52, 55, 60]) == encode_pitch_classes([0, 3, 8])

    def test_empty(self):
        assert pcid_from_notes([]) == 0
