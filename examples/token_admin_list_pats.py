#!/usr/bin/env python3
"""List the authorization IDs of personal access tokens.

Either for specific users (by VSID) or for every user in the organization.

Usage:
    VSTS_ORGANIZATION=fabrikam VSTS_ACCESS_TOKEN=... python examples/token_admin_list_pats.py
    python examples/token_admin_list_pats.py --vsid e3b2f97f-8fd8-4086-82b4-e7d878e89c37
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from vsts.tokenadmin import TokenAdminClient

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List PAT authorization IDs via the TokenAdmin REST API")
    p.add_argument("--organization", default=os.environ.get("VSTS_ORGANIZATION"))
    p.add_argument("--access-token", default=os.environ.get("VSTS_ACCESS_TOKEN"))
    p.add_argument("--pat", default=os.environ.get("VSTS_PAT"))
    p.add_argument("--vsid", action="append", default=[], help="Limit to these users (repeatable)")
    p.add_argument("--page-size", type=int, default=None, help="PAT page size (server default if omitted)")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with TokenAdminClient(
        organization=args.organization,
        access_token=args.access_token,
        personal_access_token=args.pat,
        pat_page_size=args.page_size,
    ) as admin:
        if args.vsid:
            ids = await admin.get_pat_authorization_ids_for_specific_users(args.vsid)
        else:

            def show_page(page: list) -> None:
                logger.info("Page of %d authorization IDs", len(page))

            ids = await admin.get_pat_authorization_ids_for_all_users(then_for_each_page=show_page)

    print(f"Found {len(ids)} personal access tokens:")
    for authorization_id in ids:
        print(f"  {authorization_id}")


if __name__ == "__main__":
    asyncio.run(main())
