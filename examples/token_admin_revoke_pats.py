#!/usr/bin/env python3
"""Revoke personal access tokens for specific users or for everyone.

Revoking for all users is done page by page: each page of users' PATs is
revoked before the next page of users is fetched.

Usage:
    python examples/token_admin_revoke_pats.py --vsid <vsid> [--vsid <vsid> ...]
    python examples/token_admin_revoke_pats.py --all-users
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from vsts.tokenadmin import TokenAdminClient

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Revoke PATs via the TokenAdmin REST API")
    p.add_argument("--organization", default=os.environ.get("VSTS_ORGANIZATION"))
    p.add_argument("--access-token", default=os.environ.get("VSTS_ACCESS_TOKEN"))
    p.add_argument("--pat", default=os.environ.get("VSTS_PAT"))
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument("--vsid", action="append", help="Revoke for these users (repeatable)")
    target.add_argument("--all-users", action="store_true", help="Revoke for every user")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with TokenAdminClient(
        organization=args.organization,
        access_token=args.access_token,
        personal_access_token=args.pat,
    ) as admin:
        if args.all_users:
            revoked = await admin.revoke_pats_for_all_users()
        else:
            revoked = await admin.revoke_pats_for_specific_users(args.vsid)

    print(f"Revoked {revoked} personal access tokens")


if __name__ == "__main__":
    asyncio.run(main())
