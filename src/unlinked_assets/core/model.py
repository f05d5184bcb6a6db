from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

AssetId = str

DEFAULT_LOCALE = "en-US"


@dataclass(frozen=True)
class FileInfo:
    url: str | None = None
    content_type: str | None = None
    size: Any = None  # bytes as reported; may be missing or non-numeric


@dataclass(frozen=True)
class AssetRecord:
    """An asset as read from the content repository."""

    id: AssetId
    title: Any = None  # localized mapping, plain string, or None
    file: Any = None  # localized mapping of file dicts, a file dict, or None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> AssetRecord:
        """Build a record from the Delivery API JSON shape of an asset."""
        sys_data = item.get("sys") or {}
        fields = item.get("fields") or {}
        return cls(
            id=sys_data["id"],
            title=fields.get("title"),
            file=fields.get("file"),
            created_at=sys_data.get("createdAt"),
            updated_at=sys_data.get("updatedAt"),
        )

    def localized_title(self, locale: str = DEFAULT_LOCALE) -> str:
        """Title for ``locale``, the raw title, or "Untitled"."""
        if isinstance(self.title, dict):
            value = self.title.get(locale)
            if isinstance(value, str) and value:
                return value
            return "Untitled"
        if isinstance(self.title, str) and self.title:
            return self.title
        return "Untitled"

    def file_info(self, locale: str = DEFAULT_LOCALE) -> FileInfo | None:
        """File descriptor for ``locale`` or the raw descriptor."""
        data = self.file
        if not isinstance(data, dict):
            return None
        # A localized mapping is keyed by locale; a raw descriptor has "url" etc.
        if locale in data and isinstance(data[locale], dict):
            data = data[locale]
        details = data.get("details") or {}
        return FileInfo(
            url=data.get("url") or None,
            content_type=data.get("contentType") or None,
            size=details.get("size") if isinstance(details, dict) else None,
        )


@dataclass
class UnlinkedAsset:
    """One row of the unlinked-asset report."""

    id: AssetId
    title: str
    url: str
    content_type: str
    file_size: str
    created_at: str
    updated_at: str
    contentful_url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "contentType": self.content_type,
            "fileSize": self.file_size,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "contentfulUrl": self.contentful_url,
        }


REPORT_FIELDS = [
    "id",
    "title",
    "url",
    "contentType",
    "fileSize",
    "createdAt",
    "updatedAt",
    "contentfulUrl",
]


@dataclass
class ScanResult:
    """Outcome of one scan, including how far it got."""

    assets: list[UnlinkedAsset] = field(default_factory=list)
    pages_fetched: int = 0
    assets_checked: int = 0
    error: Exception | None = None

    @property
    def truncated(self) -> bool:
        return self.error is not None
