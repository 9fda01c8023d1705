"""ContributionTrace and TraceEntry — debug execution recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from graphql_context_contributor.exceptions import ContributorException


@dataclass(frozen=True)
class TraceEntry:
    """Single contributor execution record."""

    contributor_name: str
    duration_ms: float
    outcome: Literal["OK", "FAILED"]
    keys_added: int = 0
    reason: str | None = None


@dataclass
class ContributionTrace:
    """Structured record of a single pipeline run."""

    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["OK", "ERROR"] = "OK"
    error: ContributorException | None = None
