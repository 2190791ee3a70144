"""Command line entry point for the Jira status category client."""

import sys
import json
import asyncio
import logging
import argparse
from typing import List, Optional

from jira_cloud.client import JiraClient
from jira_cloud.config import get_settings
from jira_cloud.models.status_category import StatusCategory
from jira_cloud.utils.exceptions import ConfigurationException, JiraAPIException, ValidationException
from jira_cloud.utils.logger import setup_logger

logger = logging.getLogger(__name__)


def format_category(category: StatusCategory) -> str:
    """Format a category as a single text line."""
    return f"{category.id}\t{category.key}\t{category.name}\t{category.color_name}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jira-statuscategory",
        description="Query the status categories of a Jira Cloud instance"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List all status categories")
    list_parser.add_argument("--json", action="store_true", help="Print raw JSON")

    get_parser = subparsers.add_parser("get", help="Get a status category by ID or key")
    get_parser.add_argument("id_or_key", help="Status category ID or key (e.g. 3 or 'done')")
    get_parser.add_argument("--json", action="store_true", help="Print raw JSON")

    return parser


async def run_command(client: JiraClient, args: argparse.Namespace) -> int:
    """
    Execute a parsed command against the client.

    Args:
        client: Jira API client
        args: Parsed command line arguments

    Returns:
        Process exit code
    """
    try:
        if args.command == "list":
            categories, _ = await client.status_category.get_list()
        else:
            category, _ = await client.status_category.get(args.id_or_key)
            categories = [category]

    except ValidationException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    except JiraAPIException as e:
        logger.error(f"Jira API request failed (status {e.status_code}): {e}")
        print(e.long_message(), file=sys.stderr)
        return 1

    if args.json:
        data = [c.model_dump(by_alias=True) for c in categories]
        if args.command == "get":
            data = data[0]
        print(json.dumps(data, indent=2))
    else:
        for category in categories:
            print(format_category(category))

    return 0


async def _run(args: argparse.Namespace) -> int:
    settings = get_settings()
    async with JiraClient.from_settings(settings) as client:
        return await run_command(client, args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logger(
        "jira_cloud",
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        stream=sys.stderr
    )

    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(main())
