from dataclasses import dataclass, field, asdict
from typing import Optional

from prizecheck.lottery import GameType


@dataclass(frozen=True)
class TicketRow:
    """One line on a ticket: red/blue number tokens and the stake multiplier."""
    red: tuple[str, ...]
    blue: tuple[str, ...] = ()
    multiplier: int = 1
    mode: str = ""       # play mode as printed (单式/复式...), not used for scoring

    def __post_init__(self):
        # Accept lists from callers but keep the row immutable
        object.__setattr__(self, "red", tuple(self.red))
        object.__setattr__(self, "blue", tuple(self.blue))


@dataclass(frozen=True)
class WinningNumbers:
    red: tuple[str, ...]
    blue: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "red", tuple(self.red))
        object.__setattr__(self, "blue", tuple(self.blue))


@dataclass(frozen=True)
class Ticket:
    game_label: str      # free text as printed, e.g. "双色球"
    issue: str
    rows: tuple[TicketRow, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(self.rows))

    def to_dict(self) -> dict:
        return {
            "type": self.game_label,
            "issue": self.issue,
            "tickets": [
                {"red": list(r.red), "blue": list(r.blue), "multiplier": r.multiplier, "mode": r.mode}
                for r in self.rows
            ]
        }


@dataclass(frozen=True)
class VerificationDetail:
    row_index: int       # 1-based; 0 for the single "unsupported" entry
    level: int           # 0 = no prize, 1 = first prize
    prize: int           # tier payout x multiplier
    status: str


@dataclass(frozen=True)
class VerificationResult:
    ticket_index: int
    ticket: Ticket
    game_type: GameType
    total_prize: int = 0
    details: tuple[VerificationDetail, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "ticket_index": self.ticket_index,
            "ocr_data": self.ticket.to_dict(),
            "total_prize": self.total_prize,
            "details": [asdict(d) for d in self.details]
        }
        if self.error is not None:
            data["error"] = self.error
        return data
