"""In-memory asset repository for tests and offline runs."""

from collections import defaultdict
from typing import Iterable

from ..core.model import AssetId, AssetRecord
from ..core.ports import AssetRepository


class InMemoryRepository(AssetRepository):
    """Repository backed by Python lists; records every call it serves."""

    def __init__(
        self,
        assets: Iterable[AssetRecord] = (),
        links: dict[AssetId, list[str]] | None = None,
    ):
        self.assets = sorted(assets, key=lambda a: a.created_at or "")
        self._links: dict[AssetId, list[str]] = defaultdict(list)
        for asset_id, entry_ids in (links or {}).items():
            self._links[asset_id].extend(entry_ids)
        self.calls: list[tuple] = []

    def link(self, entry_id: str, asset_id: AssetId) -> None:
        self._links[asset_id].append(entry_id)

    def list_assets(
        self, skip: int, limit: int, order: str = "sys.createdAt"
    ) -> list[AssetRecord]:
        self.calls.append(("list_assets", skip, limit, order))
        return self.assets[skip:skip + limit]

    def count_entries_linking(self, asset_id: AssetId, limit: int = 1) -> int:
        self.calls.append(("count_entries_linking", asset_id, limit))
        return len(self._links.get(asset_id, []))
