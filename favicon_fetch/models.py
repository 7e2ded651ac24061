"""
Data models for favicon retrieval.

TargetReference describes one normalized request. Found, NotFound and Failure
are the tagged outcomes returned by every fallible collaborator call (vault
read, vault write, network fetch) so the orchestrator can match on them
instead of relying on swallowed exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TargetReference(BaseModel):
    """Normalized form of a caller-supplied URL or domain."""

    raw_input: str = Field(description="Input as supplied by the caller")
    normalized_url: str = Field(description="Lower-cased URL with explicit scheme")
    hostname: str = Field(min_length=1, description="Hostname extracted from the URL")

    model_config = ConfigDict(frozen=True)


class VaultMetadata(BaseModel):
    """Metadata stored alongside a cached favicon."""

    created_at: int = Field(description="Creation time in epoch milliseconds")

    model_config = ConfigDict(extra="allow")


@dataclass(frozen=True)
class Found:
    """The collaborator produced bytes."""

    data: bytes


@dataclass(frozen=True)
class NotFound:
    """The collaborator answered, but had nothing to return."""

    reason: Optional[str] = None
    status: Optional[int] = None


@dataclass(frozen=True)
class Failure:
    """The collaborator call failed; the error was absorbed."""

    reason: str
    error: Optional[BaseException] = None


Outcome = Union[Found, NotFound, Failure]
