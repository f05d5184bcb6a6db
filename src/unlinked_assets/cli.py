"""CLI for unlinked-assets - find Contentful assets no entry links to."""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from . import __version__
from .assets.report import REPORT_FORMATS, ConsoleReporter, report_filename, save_report
from .config import AuditConfig, ConfigError, load_config, validate_config
from .core.ports import AssetRepository
from .runtime import Runtime, build_runtime


def apply_overrides(config: AuditConfig, args: argparse.Namespace) -> AuditConfig:
    """Let command-line flags win over environment and config file."""
    cf = config.contentful
    if args.space_id:
        cf.space_id = args.space_id
    if args.environment:
        cf.environment = args.environment
    if args.access_token:
        cf.access_token = args.access_token
    if args.host:
        cf.host = args.host
    if args.locale:
        cf.locale = args.locale
    if args.page_size is not None:
        config.scan.page_size = args.page_size
    if args.until_empty:
        config.scan.stop_on_short_page = False
    if args.output_dir is not None:
        config.report.output_dir = args.output_dir
    if args.format:
        config.report.format = args.format
    if args.no_color:
        config.ui.colors = False
    return config


def cmd_scan(args: argparse.Namespace, rt: Runtime) -> int:
    """Scan the space, save the report and print the summary."""
    cf = rt.config.contentful
    rt.reporter.banner(cf.space_id or "", cf.environment)

    result = rt.scanner.run()

    fmt = rt.config.report.format
    if args.output:
        output_path = Path(args.output)
    else:
        filename = report_filename(datetime.now(timezone.utc), fmt=fmt)
        output_path = rt.config.report.output_dir / filename

    save_report(result.assets, output_path, fmt=fmt)

    if args.json:
        print(json.dumps([asset.to_dict() for asset in result.assets], indent=2, ensure_ascii=False))
    else:
        rt.reporter.summary(result.assets, str(output_path))

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unlinked-assets",
        description="Find Contentful assets that no entry links to",
    )
    parser.add_argument(
        "--version", action="version", version=f"unlinked-assets {__version__}"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: cwd/unlinked-assets.toml)",
    )
    parser.add_argument("--space-id", help="Space ID (overrides SPACE_ID)")
    parser.add_argument("--environment", help="Environment ID (overrides ENVIRONMENT, default: master)")
    parser.add_argument("--access-token", help="Delivery API token (overrides ACCESS_TOKEN)")
    parser.add_argument(
        "--host", help="API host (default: cdn.contentful.com; preview.contentful.com for drafts)"
    )
    parser.add_argument("--locale", help="Locale used for titles and files (default: en-US)")
    parser.add_argument(
        "--page-size", type=int, default=None,
        help="Assets fetched per request (default: 100)",
    )
    parser.add_argument(
        "--until-empty", action="store_true",
        help="Keep paging until an empty page instead of stopping at a short one",
    )
    parser.add_argument(
        "--output-dir", type=Path, default=None,
        help="Directory for the report (default: current directory)",
    )
    parser.add_argument("--output", help="Exact report path (overrides --output-dir)")
    parser.add_argument(
        "--format", choices=list(REPORT_FORMATS), default=None,
        help="Report format (default: json)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON instead of the summary"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Hide progress output"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log HTTP requests"
    )
    return parser


def main(argv: list[str] | None = None, repository: AssetRepository | None = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = apply_overrides(load_config(config_path=args.config), args)
        validate_config(config)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        if e.missing:
            print(f"Missing: {', '.join(e.missing)}", file=sys.stderr)
        return 1

    # --json keeps stdout for the report itself
    reporter = ConsoleReporter(
        quiet=args.quiet or args.json,
        colors=config.ui.colors,
    )
    rt = build_runtime(config, repository=repository, reporter=reporter)

    try:
        return cmd_scan(args, rt)
    except Exception as e:
        print(f"❌ Error running the script: {e!r}", file=sys.stderr)
        return 1
    finally:
        rt.close()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
