"""TokenAdmin REST connector.

Wraps ``/_apis/tokenAdmin/*``: listing a user's personal access tokens,
revoking authorizations in batch and creating revocation rules. All of
these endpoints require the caller to be an organization administrator;
other callers get an AuthorizationError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any
from uuid import UUID

from vsts.tokenadmin.core import ApiArea
from vsts.tokenadmin.models import SessionToken, TokenAdminRevocation, TokenAdminRevocationRule
from vsts.tokenadmin.runtime.pagination import Page, PageHandler, PageWalkResult
from vsts.tokenadmin.runtime.rest import ResponseAdapter, RestEndpointSpec, RESTProvider

from .endpoints import get_endpoint

logger = logging.getLogger(__name__)


class TokenAdminRESTConnector(RESTProvider):
    """Connector for ``/_apis/tokenAdmin/*``."""

    area = ApiArea.TOKEN_ADMIN

    def _lookup(self, endpoint_id: str) -> tuple[RestEndpointSpec, type[ResponseAdapter]] | None:
        return get_endpoint(endpoint_id)

    async def list_personal_access_tokens(
        self,
        subject_descriptor: str,
        *,
        page_size: int | None = None,
        continuation_token: str | None = None,
    ) -> Page[SessionToken]:
        """Fetch one page of a user's personal access tokens.

        Args:
            subject_descriptor: The user's subject descriptor
            page_size: Page size; None uses the service default (recommended).
                Values above the server limit are rejected by the service.
            continuation_token: Cursor from the previous page's body

        Returns:
            Page of SessionToken
        """
        params: dict[str, Any] = {
            "subject_descriptor": subject_descriptor,
            "page_size": page_size,
            "continuation_token": continuation_token,
        }
        page: Page[SessionToken] = await self.fetch("personal_access_tokens", params)
        return page

    async def list_all_personal_access_tokens(
        self,
        subject_descriptor: str,
        *,
        page_size: int | None = None,
        on_page: PageHandler[SessionToken] | None = None,
        materialize: bool = True,
    ) -> PageWalkResult[SessionToken]:
        """Walk every page of a user's personal access tokens."""
        return await self.fetch_all(
            "personal_access_tokens",
            {"subject_descriptor": subject_descriptor, "page_size": page_size},
            on_page=on_page,
            materialize=materialize,
        )

    async def revoke_authorizations(self, authorization_ids: Iterable[UUID | str]) -> int:
        """Revoke a batch of authorizations.

        HTTP: POST /_apis/tokenAdmin/revocations [{"authorizationId": "..."}, ...] => 204

        Args:
            authorization_ids: Authorization IDs to revoke, in order

        Returns:
            Number of revocations sent (no request is made for an empty batch)
        """
        revocations = [TokenAdminRevocation(authorization_id=i) for i in authorization_ids]
        if not revocations:
            logger.debug("revocations_skipped", extra={"reason": "empty batch"})
            return 0

        await self.fetch("revocations", {"revocations": revocations})
        logger.info("revocations_sent", extra={"count": len(revocations)})
        return len(revocations)

    async def create_revocation_rule(
        self,
        scopes: str | Iterable[str],
        created_before: datetime | None = None,
    ) -> TokenAdminRevocationRule:
        """Create a revocation rule.

        HTTP: POST /_apis/tokenAdmin/revocationRules {"scopes": "...", "createdBefore": "..."} => 204

        Args:
            scopes: Space-separated scope list, or an iterable of scopes
            created_before: Reject credentials issued before this time
                (None lets the service use the rule's creation time)

        Returns:
            The rule that was sent
        """
        rule = TokenAdminRevocationRule(scopes=scopes, created_before=created_before)
        await self.fetch("revocation_rules", {"rule": rule})
        logger.info(
            "revocation_rule_created",
            extra={
                "scopes": rule.scopes,
                "created_before": rule.created_before.isoformat() if rule.created_before else None,
            },
        )
        return rule
