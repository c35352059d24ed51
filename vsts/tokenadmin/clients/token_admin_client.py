"""TokenAdminClient facade for finding and revoking credentials.

The client strings together the Graph and TokenAdmin connectors into the
administrative call sequences: resolve users, enumerate the authorization
IDs of their personal access tokens, revoke them, and create revocation
rules for credentials that cannot be revoked individually.

Architecture:
    This module implements the Facade pattern over two connectors that
    share one RESTTransport (both areas live on the same host). Each call
    is awaited before the next is issued; there is no fan-out across
    users or pages.

Design Decisions:
    - Paginated per page: walking all users hands each page of
      authorization IDs to an optional callback before fetching the next
      page of users, so callers can revoke in bounded batches instead of
      collecting everything first.
    - Per-endpoint cursor conventions: the users walk ends on an absent or
      empty header token, each PAT walk on a null or empty-GUID body token.
    - Connector injection allows testing with mock connectors.

Required permissions:
    Every endpoint used here requires organization administrator rights.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from ..connectors import GraphRESTConnector, TokenAdminRESTConnector
from ..core.config import DEFAULT_REVOCATION_SCOPES, DEFAULT_TIMEOUT, get_base_url
from ..models import TokenAdminRevocationRule
from ..runtime.pagination import STRING_CURSOR, Page, PageHandler, PageWalker, PageWalkResult
from ..runtime.rest import RESTTransport

logger = logging.getLogger(__name__)


class TokenAdminClient:
    """High-level token administration for one organization.

    Example:
        >>> async with TokenAdminClient(organization="fabrikam", access_token=token) as admin:
        ...     ids = await admin.get_pat_authorization_ids_for_all_users()
        ...     await admin.revoke_authorizations(ids)
    """

    def __init__(
        self,
        *,
        organization: str | None = None,
        base_url: str | None = None,
        access_token: str | None = None,
        personal_access_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        pat_page_size: int | None = None,
        graph: GraphRESTConnector | None = None,
        token_admin: TokenAdminRESTConnector | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            organization: Organization name used to build the base URL
            base_url: Explicit base URL (overrides organization)
            access_token: Pre-acquired bearer token
            personal_access_token: Pre-acquired PAT (basic auth)
            timeout: Total request timeout in seconds
            pat_page_size: Page size for PAT listings; None (recommended)
                uses the service default
            graph: Optional Graph connector (created if not provided)
            token_admin: Optional TokenAdmin connector (created if not provided)
        """
        self._transport: RESTTransport | None = None
        if graph is None or token_admin is None:
            self._transport = RESTTransport(
                get_base_url(organization, base_url),
                access_token=access_token,
                personal_access_token=personal_access_token,
                timeout=timeout,
            )
        self._graph = graph or GraphRESTConnector(transport=self._transport)
        self._token_admin = token_admin or TokenAdminRESTConnector(transport=self._transport)
        self._pat_page_size = pat_page_size

    @property
    def graph(self) -> GraphRESTConnector:
        return self._graph

    @property
    def token_admin(self) -> TokenAdminRESTConnector:
        return self._token_admin

    # (1) Converting VSIDs to subject descriptors

    async def get_subject_descriptors(self, vsids: Iterable[UUID | str]) -> list[str]:
        """Resolve VSIDs to subject descriptors, in input order."""
        return await self._graph.get_descriptors(vsids)

    # (2) PAT authorization IDs for specific users

    async def get_pat_authorization_ids_for_specific_users(
        self, vsids: Iterable[UUID | str]
    ) -> list[UUID]:
        """Get the authorization IDs of the PATs of users given by VSID.

        If you already hold subject descriptors, call
        :meth:`get_pat_authorization_ids_for_users` directly.
        """
        descriptors = await self.get_subject_descriptors(vsids)
        return await self.get_pat_authorization_ids_for_users(descriptors)

    # (3) PAT authorization IDs for all users

    async def get_pat_authorization_ids_for_all_users(
        self,
        then_for_each_page: PageHandler[UUID] | None = None,
        *,
        materialize: bool = True,
    ) -> list[UUID]:
        """Get the authorization IDs of every user's PATs.

        Users are listed page by page; for each page of users, the
        authorization IDs of their PATs are collected and handed to
        ``then_for_each_page`` (if given) before the next page of users is
        requested.

        Args:
            then_for_each_page: Optional handler (sync or async) for each
                non-empty page of authorization IDs
            materialize: Whether to also return the full list

        Returns:
            All authorization IDs in page order (empty when not materialized)
        """
        result = await self._walk_all_users(then_for_each_page, materialize=materialize)
        return result.items

    async def _walk_all_users(
        self,
        then_for_each_page: PageHandler[UUID] | None,
        *,
        materialize: bool,
    ) -> PageWalkResult[UUID]:
        async def fetch_page(cursor: str | None) -> Page[UUID]:
            users = await self._graph.list_users(continuation_token=cursor)
            ids = await self.get_pat_authorization_ids_for_users(u.descriptor for u in users.items)
            return Page(items=ids, continuation_token=users.continuation_token)

        walker: PageWalker[UUID] = PageWalker(policy=STRING_CURSOR, endpoint_id="users")
        return await walker.walk(
            fetch_page, on_page=then_for_each_page, materialize=materialize
        )

    # (4) PAT authorization IDs for a set of subject descriptors

    async def get_pat_authorization_ids_for_users(
        self,
        subject_descriptors: Iterable[str],
        *,
        page_size: int | None = None,
    ) -> list[UUID]:
        """Get the authorization IDs of the PATs of the given users.

        Args:
            subject_descriptors: Subject descriptors, processed in order
            page_size: PAT page size (defaults to the client's setting)

        Returns:
            Authorization IDs, user by user, in service order
        """
        size = page_size if page_size is not None else self._pat_page_size
        authorization_ids: list[UUID] = []
        for descriptor in subject_descriptors:
            await self._token_admin.list_all_personal_access_tokens(
                descriptor,
                page_size=size,
                on_page=lambda tokens: authorization_ids.extend(t.authorization_id for t in tokens),
                materialize=False,
            )
        return authorization_ids

    # (5) Revoking PATs for specific users

    async def revoke_pats_for_specific_users(self, vsids: Iterable[UUID | str]) -> int:
        """Revoke every PAT of the users given by VSID.

        Returns:
            Number of revocations sent
        """
        authorization_ids = await self.get_pat_authorization_ids_for_specific_users(vsids)
        return await self.revoke_authorizations(authorization_ids)

    # (6) Revoking PATs for all users

    async def revoke_pats_for_all_users(self) -> int:
        """Revoke every PAT in the organization, one page of users at a time.

        Revoking per page keeps each batch within the service's limits
        instead of sending the full list at once.

        Returns:
            Number of revocations sent
        """
        revoked = 0

        async def revoke_page(authorization_ids: list[UUID]) -> None:
            nonlocal revoked
            revoked += await self.revoke_authorizations(authorization_ids)

        await self._walk_all_users(revoke_page, materialize=False)
        logger.info("pats_revoked_for_all_users", extra={"count": revoked})
        return revoked

    # (7) Revoking specific authorizations

    async def revoke_authorizations(self, authorization_ids: Iterable[UUID | str]) -> int:
        """Revoke a batch of authorizations (may span several users)."""
        return await self._token_admin.revoke_authorizations(authorization_ids)

    # (8) Creating OAuth revocation rules

    async def create_revocation_rule(
        self,
        scopes: str | Iterable[str],
        created_before: datetime | None = None,
    ) -> TokenAdminRevocationRule:
        """Create a rule rejecting credentials by scope and issue time.

        A credential is rejected if it matches ANY of the scopes and was
        issued before ``created_before`` (or before the rule's creation when
        omitted).
        """
        return await self._token_admin.create_revocation_rule(scopes, created_before)

    async def revoke_self_describing_session_tokens(
        self,
        scopes: str | Iterable[str] = DEFAULT_REVOCATION_SCOPES,
        older_than: timedelta = timedelta(days=1),
        *,
        now: datetime | None = None,
    ) -> TokenAdminRevocationRule:
        """Reject self-describing session tokens older than ``older_than``.

        Args:
            scopes: Scopes to reject (default: Code or Packaging)
            older_than: Minimum token age to reject
            now: Reference time (default: current UTC time)
        """
        reference = now or datetime.now(UTC)
        return await self.create_revocation_rule(scopes, created_before=reference - older_than)

    async def close(self) -> None:
        """Close connectors and the shared transport."""
        await self._graph.close()
        await self._token_admin.close()
        if self._transport is not None:
            await self._transport.close()

    async def __aenter__(self) -> TokenAdminClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
