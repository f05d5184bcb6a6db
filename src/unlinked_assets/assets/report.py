"""Report writing and console output for unlinked-asset scans."""

import csv
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from ..core.model import REPORT_FIELDS, UnlinkedAsset
from ..core.utils import report_timestamp

RULE = "─" * 80

REPORT_FORMATS = ("json", "csv")

_STYLES = {
    "bold": "1",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "cyan": "36",
    "white": "37",
    "gray": "90",
    "underline": "4",
}


def report_filename(now: datetime | None = None, fmt: str = "json") -> str:
    """File name for a report, e.g. ``unlinked-assets-2026-10-18T08-49-12.json``."""
    return f"unlinked-assets-{report_timestamp(now)}.{fmt}"


def write_report(assets: list[UnlinkedAsset], output_path: Path) -> None:
    """Save the report as a pretty-printed JSON array."""
    data = [asset.to_dict() for asset in assets]
    with output_path.open('w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def write_report_csv(assets: list[UnlinkedAsset], output_path: Path) -> None:
    """Save the report as CSV for spreadsheet review."""
    with output_path.open('w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for asset in assets:
            writer.writerow(asset.to_dict())


def save_report(assets: list[UnlinkedAsset], output_path: Path, fmt: str = "json") -> Path:
    """Write ``assets`` in ``fmt`` and return the path written."""
    if fmt == "json":
        write_report(assets, output_path)
    elif fmt == "csv":
        write_report_csv(assets, output_path)
    else:
        raise ValueError(f"Unknown report format: {fmt}")
    return output_path


def format_summary(assets: list[UnlinkedAsset], filename: str) -> list[tuple[str, str]]:
    """
    Build the end-of-run summary as (style, text) lines.

    Args:
        assets: Unlinked assets found
        filename: Where the report was saved

    Returns:
        Lines paired with a style name ("" for plain)
    """
    lines: list[tuple[str, str]] = []
    lines.append(("", ""))
    lines.append(("green bold", f"✅ Found {len(assets)} unlinked assets."))
    lines.append(("green bold", f"💾 Report saved to {filename}"))
    lines.append(("", ""))

    if not assets:
        lines.append(("green", "👍 No unlinked assets found. Your content is well-organized!"))
        return lines

    lines.append(("cyan bold", "📋 Unlinked Assets Summary:"))
    lines.append(("gray", RULE))
    for index, asset in enumerate(assets, start=1):
        lines.append(("white bold", f"{index}. {asset.title}"))
        lines.append(("gray", f"   ID: {asset.id}"))
        lines.append(("gray", f"   Type: {asset.content_type}"))
        lines.append(("gray", f"   Size: {asset.file_size}"))
        lines.append(("gray", f"   Created: {asset.created_at}"))
        lines.append(("blue underline", f"   URL: {asset.contentful_url}"))
        if index < len(assets):
            lines.append(("gray", RULE))
    lines.append(("gray", RULE))
    lines.append(("", ""))
    lines.append(("gray", "Note: Click on the URLs to open assets in Contentful"))
    return lines


class ConsoleReporter:
    """Human-readable progress and summary output."""

    def __init__(
        self,
        quiet: bool = False,
        colors: bool = True,
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
    ):
        self.quiet = quiet
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr
        self.colors = colors and hasattr(self.stream, "isatty") and self.stream.isatty()

    def _style(self, style: str, text: str) -> str:
        if not self.colors or not style or not text:
            return text
        codes = ";".join(_STYLES[name] for name in style.split())
        return f"\033[{codes}m{text}\033[0m"

    def _print(self, style: str, text: str) -> None:
        print(self._style(style, text), file=self.stream)

    def banner(self, space_id: str, environment: str) -> None:
        if self.quiet:
            return
        self._print("cyan bold", "🔍 Searching for unlinked assets in Contentful space...")
        self._print("gray", f"Space ID: {space_id}")
        self._print("gray", f"Environment: {environment}")
        self._print("", "")

    def scan_started(self) -> None:
        if not self.quiet:
            self._print("blue bold", "⏳ Starting to scan for unlinked assets...")

    def page_requested(self, skip: int, limit: int) -> None:
        if not self.quiet:
            self._print("yellow", f"Fetching assets (skip: {skip}, limit: {limit})...")

    def asset_found(self, title: str) -> None:
        if not self.quiet:
            self._print("green", f"✓ Found unlinked asset: {title}")

    def scan_failed(self, error: Exception) -> None:
        print(f"Error fetching or processing assets: {error}", file=self.err_stream)

    def summary(self, assets: list[UnlinkedAsset], filename: str) -> None:
        for style, text in format_summary(assets, filename):
            self._print(style, text)
