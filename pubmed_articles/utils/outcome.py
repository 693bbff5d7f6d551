"""
Result type used at the gateway's internal boundary.

Network and parsing problems are recorded as a failed outcome instead of
being raised, so callers decide how to degrade.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    """Result of one upstream step."""
    status: OutcomeStatus
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "Outcome":
        return cls(OutcomeStatus.SUCCESS, value=value)

    @classmethod
    def empty(cls, reason: Optional[str] = None) -> "Outcome":
        return cls(OutcomeStatus.EMPTY, error=reason)

    @classmethod
    def failure(cls, error: str) -> "Outcome":
        return cls(OutcomeStatus.FAILURE, error=error)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    def unwrap_or(self, default: Any) -> Any:
        """Return the value on success, otherwise ``default``."""
        return self.value if self.ok else default
