"""
Data models for the billing engine.

Uses dataclasses for structured, type-safe data representation.
Inputs (Play, Performance, Invoice) are frozen; results are built up
during aggregation and returned whole.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import UnknownPlayTypeError


class Genre(str, Enum):
    """Play genres with their own pricing and credit rules."""
    TRAGEDY = "tragedy"
    COMEDY = "comedy"
    HISTORY = "history"
    PASTORAL = "pastoral"

    @classmethod
    def of(cls, play_type: str) -> "Genre":
        """Resolve a raw play type string, failing on anything unknown."""
        try:
            return cls(play_type)
        except ValueError:
            raise UnknownPlayTypeError(play_type) from None


@dataclass(frozen=True)
class Play:
    """A play as listed in the catalog."""
    name: str
    type: str  # raw genre string, resolved with Genre.of()

    @property
    def genre(self) -> Genre:
        return Genre.of(self.type)


@dataclass(frozen=True)
class Performance:
    """One performance of a play on an invoice."""
    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class Invoice:
    """A customer's invoice: performances in statement order."""
    customer: str
    performances: tuple[Performance, ...] = ()


@dataclass
class TraceStep:
    """A single step in the statement computation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class StatementLine:
    """A single performance line on a statement."""
    play_id: str
    play_name: str
    amount: int  # cents
    audience: int
    credits: int
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this line."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


@dataclass
class StatementData:
    """Complete result of a statement computation."""
    customer: str
    lines: list[StatementLine] = field(default_factory=list)
    total_amount: int = 0  # cents
    total_credits: int = 0
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the statement-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable statement trace, with each line's trace nested under it."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        for line in self.lines:
            lines.append(f"• {line.play_name} ({line.play_id})")
            for text in line.get_trace_text().splitlines():
                lines.append(f"    {text}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to a plain dict (integer cents, no formatting)."""
        return {
            "customer": self.customer,
            "total_amount": self.total_amount,
            "total_credits": self.total_credits,
            "lines": [
                {
                    "play_id": line.play_id,
                    "play_name": line.play_name,
                    "amount": line.amount,
                    "audience": line.audience,
                    "credits": line.credits,
                }
                for line in self.lines
            ],
        }
