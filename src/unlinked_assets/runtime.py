"""Runtime wiring helper for the CLI."""

from dataclasses import dataclass

from .adapters.cda_client import ContentDeliveryClient
from .assets.report import ConsoleReporter
from .assets.scanner import UnlinkedAssetScanner
from .config import AuditConfig
from .core.ports import AssetRepository


@dataclass
class Runtime:
    """Container for all wired components."""
    config: AuditConfig
    repository: AssetRepository
    reporter: ConsoleReporter
    scanner: UnlinkedAssetScanner

    def close(self) -> None:
        close = getattr(self.repository, "close", None)
        if close is not None:
            close()


def build_runtime(
    config: AuditConfig,
    repository: AssetRepository | None = None,
    reporter: ConsoleReporter | None = None,
) -> Runtime:
    """Build and wire all components for a validated config."""
    cf = config.contentful

    if repository is None:
        repository = ContentDeliveryClient(
            space_id=cf.space_id or "",
            access_token=cf.access_token or "",
            environment=cf.environment,
            host=cf.host,
            timeout=cf.timeout,
        )
    if reporter is None:
        reporter = ConsoleReporter(colors=config.ui.colors)

    scanner = UnlinkedAssetScanner(
        repository,
        space_id=cf.space_id or "",
        environment=cf.environment,
        locale=cf.locale,
        page_size=config.scan.page_size,
        stop_on_short_page=config.scan.stop_on_short_page,
        reporter=reporter,
    )

    return Runtime(
        config=config,
        repository=repository,
        reporter=reporter,
        scanner=scanner,
    )
