"""Tests for report writing and console output."""

import csv
import io
import json
import re
from datetime import datetime, timezone

import pytest

from unlinked_assets.assets.report import (
    RULE,
    ConsoleReporter,
    format_summary,
    report_filename,
    save_report,
    write_report,
    write_report_csv,
)
from unlinked_assets.core.model import UnlinkedAsset


def make_entry(asset_id: str, title: str = "Photo") -> UnlinkedAsset:
    return UnlinkedAsset(
        id=asset_id,
        title=title,
        url=f"//images.ctfassets.net/s/{asset_id}/photo.jpg",
        content_type="image/jpeg",
        file_size="2.00 KB",
        created_at="3/7/2023",
        updated_at="3/8/2023",
        contentful_url=f"https://app.contentful.com/spaces/s/environments/master/assets/{asset_id}",
    )


def test_report_filename():
    """Test the timestamped report name."""
    now = datetime(2026, 10, 18, 8, 49, 12, 500000, tzinfo=timezone.utc)

    assert report_filename(now) == "unlinked-assets-2026-10-18T08-49-12.json"
    assert report_filename(now, fmt="csv") == "unlinked-assets-2026-10-18T08-49-12.csv"


def test_report_filename_default_now():
    """Test the default name uses the current time."""
    name = report_filename()

    assert re.fullmatch(r"unlinked-assets-\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}\.json", name)


def test_write_report_json(tmp_path):
    """Test the report is a pretty-printed JSON array in order."""
    path = tmp_path / "report.json"

    write_report([make_entry("a1", "Ünïcode"), make_entry("a2")], path)

    text = path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert "Ünïcode" in text
    data = json.loads(text)
    assert [row["id"] for row in data] == ["a1", "a2"]
    assert data[0]["contentType"] == "image/jpeg"
    assert data[0]["fileSize"] == "2.00 KB"
    assert data[0]["contentfulUrl"].endswith("/assets/a1")


def test_write_report_empty(tmp_path):
    """Test an empty scan writes an empty array."""
    path = tmp_path / "report.json"

    write_report([], path)

    assert json.loads(path.read_text()) == []


def test_write_report_csv(tmp_path):
    """Test CSV output has a header and one row per asset."""
    path = tmp_path / "report.csv"

    write_report_csv([make_entry("a1"), make_entry("a2")], path)

    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["id"] for row in rows] == ["a1", "a2"]
    assert rows[0]["createdAt"] == "3/7/2023"


def test_save_report_unknown_format(tmp_path):
    """Test an unknown format is rejected."""
    with pytest.raises(ValueError):
        save_report([], tmp_path / "r.xml", fmt="xml")


def test_save_report_unwritable(tmp_path):
    """Test write failures propagate."""
    with pytest.raises(OSError):
        save_report([], tmp_path / "missing" / "r.json")


def test_format_summary_with_assets():
    """Test the enumerated summary list."""
    lines = [text for _, text in format_summary([make_entry("a1", "One"), make_entry("a2", "Two")], "out.json")]

    assert "✅ Found 2 unlinked assets." in lines
    assert "💾 Report saved to out.json" in lines
    assert "1. One" in lines
    assert "2. Two" in lines
    assert "   ID: a1" in lines
    assert "   Type: image/jpeg" in lines
    assert "   Size: 2.00 KB" in lines
    assert "   Created: 3/7/2023" in lines
    assert "   URL: https://app.contentful.com/spaces/s/environments/master/assets/a2" in lines
    # Opening rule, one separator, closing rule
    assert lines.count(RULE) == 3
    assert not any("well-organized" in line for line in lines)


def test_format_summary_empty():
    """Test the positive message when nothing is unlinked."""
    lines = [text for _, text in format_summary([], "out.json")]

    assert "✅ Found 0 unlinked assets." in lines
    assert "👍 No unlinked assets found. Your content is well-organized!" in lines
    assert RULE not in lines


def test_console_reporter_plain_when_not_tty():
    """Test no ANSI codes are written to a non-terminal stream."""
    out = io.StringIO()
    reporter = ConsoleReporter(colors=True, stream=out)

    reporter.banner("space1", "master")
    reporter.asset_found("Logo")

    text = out.getvalue()
    assert "\033[" not in text
    assert "Space ID: space1" in text
    assert "Environment: master" in text
    assert "✓ Found unlinked asset: Logo" in text


def test_console_reporter_colors_on_tty():
    """Test styling is applied on a terminal."""
    class Tty(io.StringIO):
        def isatty(self):
            return True

    out = Tty()
    ConsoleReporter(colors=True, stream=out).page_requested(0, 100)

    assert out.getvalue() == "\033[33mFetching assets (skip: 0, limit: 100)...\033[0m\n"


def test_console_reporter_quiet():
    """Test quiet mode hides progress but keeps the summary."""
    out = io.StringIO()
    err = io.StringIO()
    reporter = ConsoleReporter(quiet=True, stream=out, err_stream=err)

    reporter.banner("s", "master")
    reporter.scan_started()
    reporter.page_requested(0, 100)
    reporter.asset_found("x")
    reporter.scan_failed(RuntimeError("boom"))
    reporter.summary([], "r.json")

    assert "Fetching" not in out.getvalue()
    assert "Found 0 unlinked assets." in out.getvalue()
    assert "Error fetching or processing assets: boom" in err.getvalue()
