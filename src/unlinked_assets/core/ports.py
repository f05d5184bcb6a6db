"""Ports between the scanner and its repository and progress sink."""

from typing import Protocol
from .model import AssetId, AssetRecord


class AssetRepository(Protocol):
    """
    Read-only view of a content repository: paged assets plus a reverse
    "which entries link here" query.
    """

    def list_assets(
        self, skip: int, limit: int, order: str = "sys.createdAt"
    ) -> list[AssetRecord]:
        pass

    def count_entries_linking(self, asset_id: AssetId, limit: int = 1) -> int:
        pass


class ScanReporter(Protocol):
    """
    Receives progress notifications from the scanner.
    """

    def scan_started(self) -> None:
        pass

    def page_requested(self, skip: int, limit: int) -> None:
        pass

    def asset_found(self, title: str) -> None:
        pass

    def scan_failed(self, error: Exception) -> None:
        pass
