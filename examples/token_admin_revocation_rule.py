#!/usr/bin/env python3
"""Create an OAuth revocation rule.

Self-describing session tokens cannot be revoked one by one; a rule rejects
every token matching ANY of the given scopes and issued before a cutoff.
Scopes reference: https://docs.microsoft.com/en-us/vsts/integrate/get-started/authentication/oauth?view=vsts#scopes

Usage:
    python examples/token_admin_revocation_rule.py --scope vso.code --scope vso.packaging --older-than-days 1
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from datetime import timedelta

from vsts.tokenadmin import TokenAdminClient

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create a revocation rule via the TokenAdmin REST API")
    p.add_argument("--organization", default=os.environ.get("VSTS_ORGANIZATION"))
    p.add_argument("--access-token", default=os.environ.get("VSTS_ACCESS_TOKEN"))
    p.add_argument("--pat", default=os.environ.get("VSTS_PAT"))
    p.add_argument("--scope", action="append", default=None, help="Scope to reject (repeatable)")
    p.add_argument("--older-than-days", type=float, default=1.0)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with TokenAdminClient(
        organization=args.organization,
        access_token=args.access_token,
        personal_access_token=args.pat,
    ) as admin:
        kwargs = {"older_than": timedelta(days=args.older_than_days)}
        if args.scope:
            kwargs["scopes"] = args.scope
        rule = await admin.revoke_self_describing_session_tokens(**kwargs)

    created_before = rule.created_before.isoformat() if rule.created_before else "now"
    print(f"Revocation rule created: scopes='{rule.scopes}' createdBefore={created_before}")


if __name__ == "__main__":
    asyncio.run(main())
