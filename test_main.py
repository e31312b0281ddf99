"""Tests for the command-line entry point."""

import json
import os

import pytest

from calendar_logic import month_grid
from main import format_month, main


def test_sample_flag_prints_holidays(capsys):
    main(["--sample", "--year", "2024"])
    out = capsys.readouterr().out
    assert "Jan 1: New Year" in out
    assert "Mar 28: Maundy Thursday" in out


def test_text_output_defaults_to_sample_events(capsys):
    main(["--year", "2024"])
    out = capsys.readouterr().out
    assert "January 2024" in out
    assert "(31)" in out
    assert "Jan 1: New Year" in out
    assert "Dec 25: Christmas*" in out


def test_json_output_with_events_file(tmp_path, capsys):
    events = tmp_path / "events.txt"
    events.write_text("Jan 1: A\nJan 1: B\nJun 5: C\n", encoding="utf-8")
    main(["--year", "2024", "--events", str(events), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["year"] == 2024
    assert len(data["months"]) == 12
    assert data["months"][0]["weeks"][0][1] == {
        "date": 1, "event": "A; B", "dayOfWeek": 1, "thisMonth": True,
    }


def test_unreadable_events_file_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--events", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 2


def test_png_export(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"cell_width": 20, "cell_height": 20, "font_size": 8}),
                      encoding="utf-8")
    out_dir = tmp_path / "png"
    main(["--year", "2025", "--png", str(out_dir), "--config", str(config)])
    printed = capsys.readouterr().out.split()
    assert len(printed) == 12
    assert sorted(os.listdir(out_dir))[0] == "2025-01.png"


def test_format_month_marks_padding():
    lines = format_month(month_grid(2024, 8, [{"month": 8, "date": 2, "event": "Labor Day"}]), 2024)
    rows = lines.split("\n")
    assert rows[0].strip() == "September 2024"
    assert rows[2].startswith("(25)")
    assert rows[3].startswith("   1")
    assert rows[-1] == "  Sep 2: Labor Day"
