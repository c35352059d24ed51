"""Graph (identity) data models."""

from pydantic import BaseModel, ConfigDict, Field


class GraphDescriptorResult(BaseModel):
    """Result of resolving a storage key (VSID) to a subject descriptor."""

    value: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, extra="ignore")


class GraphUser(BaseModel):
    """A user as listed by the Graph users endpoint.

    Only ``descriptor`` is needed to look up the user's tokens; the rest is
    kept for display.
    """

    descriptor: str = Field(..., min_length=1)
    display_name: str | None = Field(None, alias="displayName")
    principal_name: str | None = Field(None, alias="principalName")
    mail_address: str | None = Field(None, alias="mailAddress")
    origin: str | None = None
    origin_id: str | None = Field(None, alias="originId")
    subject_kind: str | None = Field(None, alias="subjectKind")
    domain: str | None = None
    url: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
