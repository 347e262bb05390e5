"""Tests for address word parsing."""

import pytest

from toolpathview.core.fields import FieldKind, parse_field, parse_fields


class TestParseFields:
    def test_motion_line(self):
        fields = parse_fields("G1 X10 Y-2.5 Z.5")
        assert [f.kind for f in fields] == [
            FieldKind.G, FieldKind.X, FieldKind.Y, FieldKind.Z,
        ]
        assert [f.value for f in fields] == pytest.approx([1.0, 10.0, -2.5, 0.5])

    def test_lowercase_letters_normalized(self):
        fields = parse_fields("g2 x1 y2 i3 j4")
        assert [f.letter for f in fields] == ["G", "X", "Y", "I", "J"]
        assert fields[3].kind is FieldKind.I

    def test_unknown_letters_kept_as_other(self):
        fields = parse_fields("G1 X10 F500 S1200 M3 T1")
        kinds = [f.kind for f in fields]
        assert kinds[:2] == [FieldKind.G, FieldKind.X]
        assert all(k is FieldKind.OTHER for k in kinds[2:])
        assert [f.letter for f in fields[2:]] == ["F", "S", "M", "T"]

    def test_unparseable_field_dropped(self):
        fields = parse_fields("G1 Xabc Y5")
        assert [f.letter for f in fields] == ["G", "Y"]

    def test_malformed_number_dropped(self):
        assert parse_fields("X1.2.3") == []

    def test_letter_without_number_dropped(self):
        assert parse_fields("X") == []

    def test_non_finite_dropped(self):
        assert parse_fields("Xnan Yinf Z1") == [parse_field("Z1")]

    def test_trailing_paren_dropped(self):
        assert [f.letter for f in parse_fields("G1 X5)")] == ["G"]

    def test_radius_and_offsets(self):
        fields = parse_fields("G3 X1 Y1 R-2 K0.5")
        assert fields[3].kind is FieldKind.R
        assert fields[3].value == pytest.approx(-2.0)
        assert fields[4].kind is FieldKind.K


class TestFieldKind:
    def test_axis_flags(self):
        assert FieldKind.X.is_axis
        assert FieldKind.Z.is_axis
        assert not FieldKind.I.is_axis

    def test_offset_flags(self):
        assert FieldKind.J.is_offset
        assert not FieldKind.R.is_offset
        assert not FieldKind.OTHER.is_offset

    def test_field_str(self):
        assert str(parse_field("x-1.5")) == "X-1.5"
