"""Token administration data models.

Field names follow the service's camelCase wire format through aliases,
so ``model_dump(by_alias=True)`` yields request bodies directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SessionToken(BaseModel):
    """A personal access token as returned by the TokenAdmin listing.

    The token secret itself is never returned by the listing endpoint;
    ``authorization_id`` is what revocation needs.
    """

    authorization_id: UUID = Field(..., alias="authorizationId")
    display_name: str | None = Field(None, alias="displayName")
    scope: str | None = None
    target_accounts: list[str] | None = Field(None, alias="targetAccounts")
    valid_from: datetime | None = Field(None, alias="validFrom")
    valid_to: datetime | None = Field(None, alias="validTo")
    is_valid: bool | None = Field(None, alias="isValid")
    is_public: bool | None = Field(None, alias="isPublic")
    client_id: UUID | None = Field(None, alias="clientId")
    access_id: UUID | None = Field(None, alias="accessId")
    user_id: UUID | None = Field(None, alias="userId")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class TokenAdminRevocation(BaseModel):
    """Revocation of a single authorization."""

    authorization_id: UUID = Field(..., alias="authorizationId")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True)


class TokenAdminRevocationRule(BaseModel):
    """Rule rejecting credentials matching ``scopes`` issued before ``created_before``.

    Used for credentials, such as self-describing session tokens, that cannot
    be revoked one by one. When ``created_before`` is omitted the service
    applies the rule's own creation time.
    """

    scopes: str = Field(..., min_length=1)
    created_before: datetime | None = Field(None, alias="createdBefore")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("scopes", mode="before")
    @classmethod
    def _join_scopes(cls, v: object) -> object:
        if isinstance(v, str) or not isinstance(v, Iterable):
            return v
        return " ".join(str(s) for s in v)

    @field_validator("scopes")
    @classmethod
    def _require_scope(cls, v: str) -> str:
        v = " ".join(v.split())
        if not v:
            raise ValueError("at least one scope is required")
        return v

    def to_wire(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
