#!/usr/bin/env python3
"""
Examples for using the Jira status category client.

Set JIRA_BASE_URL, JIRA_USERNAME and JIRA_API_TOKEN before running.
"""

import asyncio

from jira_cloud import JiraAPIException, JiraClient, StatusCategoryKey
from jira_cloud.config import get_settings


async def example_1_list_categories(client: JiraClient):
    """Example 1: List every status category."""
    print("=== Example 1: List Categories ===")

    categories, response = await client.status_category.get_list()
    print(f"HTTP {response.status_code}, {len(categories)} categories")

    for category in categories:
        marker = "default" if category.is_default() else "custom"
        print(f"  {category.id:>3}  {category.key:<15} {category.name} ({category.color_name}, {marker})")

    print()


async def example_2_get_by_key(client: JiraClient):
    """Example 2: Fetch the done category by key and compare against the constant."""
    print("=== Example 2: Get By Key ===")

    category, _ = await client.status_category.get(StatusCategoryKey.COMPLETE.value)
    print(f"  {category.name} is complete: {category.key == StatusCategoryKey.COMPLETE}")

    print()


async def example_3_error_handling(client: JiraClient):
    """Example 3: Handle a missing category."""
    print("=== Example 3: Error Handling ===")

    try:
        await client.status_category.get("does-not-exist")
    except JiraAPIException as e:
        print(f"  HTTP {e.status_code}: {e}")
        print(e.long_message())

    print()


async def main():
    async with JiraClient.from_settings(get_settings()) as client:
        await example_1_list_categories(client)
        await example_2_get_by_key(client)
        await example_3_error_handling(client)


if __name__ == "__main__":
    asyncio.run(main())
