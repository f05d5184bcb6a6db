"""Configuration loader: unlinked-assets.toml, .env and the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from dotenv import dotenv_values

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

CONFIG_FILENAME = "unlinked-assets.toml"


class ConfigError(ValueError):
    """Configuration is missing or invalid."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


@dataclass
class ContentfulConfig:
    """Where and how to reach the space."""
    space_id: str | None = None
    access_token: str | None = None
    environment: str = "master"
    host: str = "cdn.contentful.com"
    locale: str = "en-US"
    timeout: float | None = None


@dataclass
class ScanConfig:
    """Pagination settings."""
    page_size: int = 100
    stop_on_short_page: bool = True


@dataclass
class ReportConfig:
    """Report output settings."""
    output_dir: Path = Path(".")
    format: str = "json"


@dataclass
class UIConfig:
    """UI configuration."""
    colors: bool = True


@dataclass
class AuditConfig:
    """Complete unlinked-assets configuration."""
    contentful: ContentfulConfig = field(default_factory=ContentfulConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
    dotenv_path: Path | None = None,
) -> AuditConfig:
    """
    Load configuration.

    Precedence, highest first:
    1. Environment variables (SPACE_ID, ENVIRONMENT, ACCESS_TOKEN, CONTENTFUL_HOST)
    2. .env file (never overrides the real environment)
    3. config_path, or cwd/unlinked-assets.toml
    4. Defaults

    Args:
        config_path: Explicit path to a TOML config file
        env: Environment mapping (default: os.environ)
        dotenv_path: .env file to read (default: cwd/.env)

    Returns:
        AuditConfig with resolved settings; not yet validated
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_FILENAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                try:
                    toml_data = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ConfigError(f"Invalid config file {path}: {e}") from e
            break

    # Real environment wins over .env
    if dotenv_path is None:
        dotenv_path = Path.cwd() / ".env"
    merged_env: dict[str, str] = {}
    if dotenv_path.exists():
        merged_env.update({k: v for k, v in dotenv_values(dotenv_path).items() if v is not None})
    merged_env.update(os.environ if env is None else env)

    # Parse contentful config
    cf_data = toml_data.get("contentful", {})
    timeout = cf_data.get("timeout")
    contentful_config = ContentfulConfig(
        space_id=merged_env.get("SPACE_ID") or cf_data.get("space_id") or None,
        access_token=merged_env.get("ACCESS_TOKEN") or cf_data.get("access_token") or None,
        environment=merged_env.get("ENVIRONMENT") or cf_data.get("environment") or "master",
        host=merged_env.get("CONTENTFUL_HOST") or cf_data.get("host") or "cdn.contentful.com",
        locale=cf_data.get("locale", "en-US"),
        timeout=_parse_timeout(timeout),
    )

    # Parse scan config
    scan_data = toml_data.get("scan", {})
    scan_config = ScanConfig(
        page_size=scan_data.get("page_size", 100),
        stop_on_short_page=scan_data.get("stop_on_short_page", True),
    )

    # Parse report config
    report_data = toml_data.get("report", {})
    report_config = ReportConfig(
        output_dir=Path(report_data.get("output_dir", ".")),
        format=report_data.get("format", "json"),
    )

    # Parse UI config
    ui_data = toml_data.get("ui", {})
    ui_config = UIConfig(
        colors=ui_data.get("colors", True)
    )

    return AuditConfig(
        contentful=contentful_config,
        scan=scan_config,
        report=report_config,
        ui=ui_config,
    )


def _parse_timeout(value: Any) -> float | None:
    """Seconds from the config file, or None when unset."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"timeout must be a number of seconds, got {value!r}")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"timeout must be a number of seconds, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"timeout must be positive, got {value!r}")
    return timeout


def validate_config(config: AuditConfig) -> None:
    """Raise ConfigError if required values are missing or settings are invalid."""
    missing = []
    if not config.contentful.space_id:
        missing.append("SPACE_ID")
    if not config.contentful.access_token:
        missing.append("ACCESS_TOKEN")
    if missing:
        raise ConfigError(
            "Missing required environment variables. Please check your .env file.",
            missing=missing,
        )

    page_size = config.scan.page_size
    if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size <= 0:
        raise ConfigError(f"page_size must be a positive integer, got {config.scan.page_size!r}")

    if config.report.format not in ("json", "csv"):
        raise ConfigError(f"Unknown report format: {config.report.format}")
