"""Unlinked-asset scanner for a Contentful space."""

from ..core.model import DEFAULT_LOCALE, AssetRecord, FileInfo, ScanResult, UnlinkedAsset
from ..core.ports import AssetRepository, ScanReporter
from ..core.utils import format_date, format_file_size, webapp_url

DEFAULT_PAGE_SIZE = 100


class UnlinkedAssetScanner:
    """Walks every asset page by page and keeps those no entry links to."""

    def __init__(
        self,
        repository: AssetRepository,
        space_id: str,
        environment: str = "master",
        locale: str = DEFAULT_LOCALE,
        page_size: int = DEFAULT_PAGE_SIZE,
        stop_on_short_page: bool = True,
        reporter: ScanReporter | None = None,
    ):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.repository = repository
        self.space_id = space_id
        self.environment = environment
        self.locale = locale
        self.page_size = page_size
        self.stop_on_short_page = stop_on_short_page
        self.reporter = reporter

    def scan(self) -> list[UnlinkedAsset]:
        """Return the unlinked assets, in creation order."""
        return self.run().assets

    def run(self) -> ScanResult:
        """
        Scan every page of assets.

        A failure while fetching or processing a page ends the scan; whatever
        was collected before it is returned with ``error`` set.

        Returns:
            ScanResult with the unlinked assets and scan counters
        """
        result = ScanResult()
        skip = 0
        has_more = True

        if self.reporter:
            self.reporter.scan_started()

        while has_more:
            try:
                if self.reporter:
                    self.reporter.page_requested(skip, self.page_size)

                assets = self.repository.list_assets(
                    skip=skip, limit=self.page_size, order="sys.createdAt"
                )
                result.pages_fetched += 1

                if not assets:
                    has_more = False
                    continue

                for asset in assets:
                    result.assets_checked += 1
                    entry = self.check_asset(asset)
                    if entry is not None:
                        result.assets.append(entry)
                        if self.reporter:
                            self.reporter.asset_found(entry.title)

                skip += self.page_size

                # A short page is taken to be the last one
                if self.stop_on_short_page and len(assets) < self.page_size:
                    has_more = False
            except Exception as e:
                result.error = e
                if self.reporter:
                    self.reporter.scan_failed(e)
                has_more = False

        return result

    def check_asset(self, asset: AssetRecord) -> UnlinkedAsset | None:
        """Report entry for ``asset`` if no entry links to it, else None."""
        total = self.repository.count_entries_linking(asset.id, limit=1)
        if total != 0:
            return None
        return self.build_entry(asset)

    def build_entry(self, asset: AssetRecord) -> UnlinkedAsset:
        file_info = asset.file_info(self.locale) or FileInfo()
        return UnlinkedAsset(
            id=asset.id,
            title=asset.localized_title(self.locale),
            url=file_info.url or "No URL",
            content_type=file_info.content_type or "Unknown",
            file_size=format_file_size(file_info.size),
            created_at=format_date(asset.created_at),
            updated_at=format_date(asset.updated_at),
            contentful_url=webapp_url(self.space_id, asset.id, self.environment),
        )


def scan_unlinked_assets(
    repository: AssetRepository,
    space_id: str,
    environment: str = "master",
    page_size: int = DEFAULT_PAGE_SIZE,
    reporter: ScanReporter | None = None,
) -> list[UnlinkedAsset]:
    """Scan a repository with default settings.

    Args:
        repository: Source of assets and link counts
        space_id: Space the deep links point into
        environment: Environment the deep links point into
        page_size: Assets requested per page
        reporter: Optional progress sink

    Returns:
        Unlinked assets in creation order
    """
    scanner = UnlinkedAssetScanner(
        repository,
        space_id=space_id,
        environment=environment,
        page_size=page_size,
        reporter=reporter,
    )
    return scanner.scan()
