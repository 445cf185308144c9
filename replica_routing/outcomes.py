"""
Result variants for a unit of database work.

A read or write ends in exactly one of:
- Success: the operation returned a value
- Failure: the operation raised; kind says whether it was a read-only rejection
- Replay: a read-only rejection that should be re-issued in the primary region
"""
import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .replay import ReplayDirective


class FailureKind(enum.Enum):
    READ_ONLY_REJECTION = 'read-only-rejection'
    OTHER = 'other'


@dataclass(frozen=True)
class Success:
    value: Any = None


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    raw_message: str
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class Replay:
    directive: 'ReplayDirective'
    failure: Failure
