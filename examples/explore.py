#!/usr/bin/env python3
"""
GitHub Explorer - Complete Browsing Workflow Example

This example walks through the three screens of the explorer:
1. List the most-starred repositories of a category and sort them
2. Search within the category
3. Refresh one repository and list its owner's repositories

Set GITHUB_TOKEN to raise the API rate limit.
Run with: python examples/explore.py [search text]
"""

import asyncio
import logging
import sys

from ghexplorer import (
    AsyncGitHubClient,
    HomeViewModel,
    OwnerDetailViewModel,
    RepoCategory,
    RepositoryDetailViewModel,
    configure_logging,
    format_count,
)


async def main(search_text: str) -> int:
    """Run the browsing workflow example."""
    configure_logging(level=logging.WARNING)
    print("=== GitHub Explorer Example ===\n")

    async with AsyncGitHubClient.from_env() as client:
        # Step 1: Category listing
        home = HomeViewModel(api_service=client.repos)
        home.selected_category = RepoCategory.SWIFT
        print(f"1. Fetching {home.selected_category} repositories...")
        await home.fetch_repositories()
        if home.display_state.is_error:
            print(f"   Failed: {home.error_message}")
            return 1

        home.sort_repositories_by_forks(ascending=False)
        for repo in home.repositories[:5]:
            print(
                f"   {repo.name:<30} {format_count(repo.stars):>7} stars  "
                f"{repo.formatted_forks:<12} {repo.star_rating}"
            )

        # Step 2: Search
        home.search_text = search_text
        print(f"\n2. Searching for {search_text!r}...")
        await home.search_repositories()
        if home.error_message:
            print(f"   {home.error_message}")
        print(f"   {len(home.search_results)} results")

        if not home.repositories:
            return 0

        # Step 3: Detail and owner
        detail = RepositoryDetailViewModel(home.repositories[0], api_service=client.repos)
        print(f"\n3. Refreshing {detail.repository_name}...")
        await detail.refresh_repository_details()
        if detail.error_message:
            print(f"   {detail.error_message}")
        print(f"   {detail.repository_url} ({detail.star_count} stars, popular={detail.is_popular})")

        if detail.repository.owner is not None:
            owner = OwnerDetailViewModel(detail.repository.owner, api_service=client.repos)
            await owner.fetch_owner_repositories()
            print(
                f"   {owner.owner_name} owns {owner.repository_count} listed repositories "
                f"with {format_count(owner.total_stars)} stars in total"
            )

    print("\n=== Example completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(" ".join(sys.argv[1:]) or "networking")))
