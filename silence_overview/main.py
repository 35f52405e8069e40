"""
Command-line entry point.

Publishes the active Alertmanager silences into a pinned GitHub team
discussion, replacing the section previously written for the same
alertmanager name.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from silence_overview.config import Settings, get_settings
from silence_overview.errors import SilenceOverviewError
from silence_overview.services import SilenceOverviewPipeline

logger = logging.getLogger("silence_overview")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="silence-overview",
        description="Publish active Alertmanager silences into a GitHub team discussion.",
    )
    parser.add_argument("--github-api-url", help="API url of GitHub")
    parser.add_argument("--github-token", help="Token for GitHub (default: $GITHUB_TOKEN)")
    parser.add_argument("--github-org", help="Org for GitHub")
    parser.add_argument("--github-team", help="Team slug for GitHub")
    parser.add_argument("--github-discussion-title", help="Title of the GitHub discussion")
    parser.add_argument(
        "--github-alertmanager-name",
        help="Heading and identity of the alertmanager block in the discussion",
    )
    parser.add_argument("--alertmanager-addr", help="Address of Alertmanager")
    parser.add_argument(
        "--silence-comment-filter",
        help="Silences whose comment matches this pattern are filtered out",
    )
    parser.add_argument("--request-timeout", type=int, help="Timeout for outbound requests in seconds")
    parser.add_argument(
        "--insecure-skip-verify",
        action="store_true",
        help="Skip TLS certificate verification for the GitHub API",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Log the merged body instead of publishing it"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment and .env provide defaults; flags given on the command line win."""
    return get_settings(
        github_api_url=args.github_api_url,
        github_token=args.github_token,
        github_org=args.github_org,
        github_team=args.github_team,
        github_discussion_title=args.github_discussion_title,
        github_alertmanager_name=args.github_alertmanager_name,
        alertmanager_addr=args.alertmanager_addr,
        silence_comment_filter=args.silence_comment_filter,
        request_timeout=args.request_timeout,
        github_verify_ssl=False if args.insecure_skip_verify else None,
        dry_run=True if args.dry_run else None,
        debug=True if args.debug else None,
    )


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        configure_logging(args.debug)
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(settings.debug)
    logger.info(
        f"Starting {settings.app_name} for alertmanager '{settings.github_alertmanager_name}' "
        f"({settings.alertmanager_addr}) -> {settings.github_org}/{settings.github_team}"
    )

    try:
        result = SilenceOverviewPipeline(settings).run()
    except SilenceOverviewError as e:
        logger.error(str(e))
        return 1

    if result.dry_run:
        logger.info(f"Dry run finished with {result.silence_count} silences")
    else:
        action = "Created" if result.created else "Updated"
        logger.info(f"{action} discussion '{settings.github_discussion_title}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
