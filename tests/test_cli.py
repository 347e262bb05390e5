"""Tests for the command-line entry point."""

import json

import pytest

from toolpathview.__main__ import main


PROGRAM = "G0 X10 Y10\nG1 Z-1\nG1 X20\n"


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "part.nc"
    path.write_text(PROGRAM)
    return path


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"


def _run(capsys, *args):
    code = main([str(a) for a in args])
    out, err = capsys.readouterr()
    return code, out, err


class TestCli:
    def test_summary(self, capsys, program, settings_path):
        code, out, _ = _run(capsys, program, "--settings", settings_path)
        assert code == 0
        assert "part.nc  [Standard]" in out
        assert "Points: 4" in out
        assert "Segments: 2 (1 travel, 1 cutting)" in out
        assert "Bounds: X 0.0000..20.0000" in out
        assert "Rendered points: 5 (budget 10000)" in out

    def test_no_lod(self, capsys, program, settings_path):
        _, out, _ = _run(capsys, program, "--settings", settings_path, "--no-lod")
        assert "Level of detail: off" in out

    def test_high_detail_preset(self, capsys, program, settings_path):
        _, out, _ = _run(capsys, program, "--settings", settings_path,
                         "--preset", "high_detail")
        assert "[High detail]" in out
        assert "Level of detail: off" in out

    def test_max_points_override(self, capsys, program, settings_path):
        _, out, _ = _run(capsys, program, "--settings", settings_path,
                         "--max-points", "3")
        assert "(budget 3)" in out

    def test_settings_file_used(self, capsys, program, settings_path):
        settings_path.write_text(json.dumps({"use_level_of_detail": False}))
        _, out, _ = _run(capsys, program, "--settings", settings_path)
        assert "Level of detail: off" in out

    def test_z_levels(self, capsys, program, settings_path):
        _, out, _ = _run(capsys, program, "--settings", settings_path, "--z-levels")
        assert "Z levels: 2" in out
        assert "Z=-1.0000  (0.000)" in out
        assert "Z=0.0000  (1.000)" in out

    def test_check_ok(self, capsys, program, settings_path):
        code, out, _ = _run(capsys, program, "--settings", settings_path, "--check")
        assert code == 0
        assert "Structure OK" in out

    def test_check_empty_program_warns(self, capsys, tmp_path, settings_path):
        empty = tmp_path / "empty.nc"
        empty.write_text("(nothing)\n")
        code, out, _ = _run(capsys, empty, "--settings", settings_path, "--check")
        assert code == 0
        assert "Points: 0" in out
        assert "WARNING" in out
        assert "Structure OK" not in out

    def test_missing_file(self, capsys, tmp_path, settings_path):
        code, _, err = _run(capsys, tmp_path / "nope.nc", "--settings", settings_path)
        assert code == 1
        assert "file not found" in err
