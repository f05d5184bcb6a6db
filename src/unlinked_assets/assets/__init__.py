"""Unlinked-asset scanning and reporting."""

from .report import ConsoleReporter, report_filename, save_report, write_report
from .scanner import UnlinkedAssetScanner, scan_unlinked_assets

__all__ = [
    "UnlinkedAssetScanner",
    "scan_unlinked_assets",
    "ConsoleReporter",
    "report_filename",
    "save_report",
    "write_report",
]
