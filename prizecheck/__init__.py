"""Prize verification for 双色球, 大乐透 and 排列5 tickets."""

from .errors import (
    ArithmeticOverflow,
    InputValidationError,
    LimitExceeded,
    ResultsNotFound,
    VerificationError,
)
from .evaluator import TicketEvaluator, evaluate_ticket, validate_ticket
from .lottery import GameType, get_config, resolve_game_type
from .models import Ticket, TicketRow, VerificationDetail, VerificationResult, WinningNumbers
from .recognition import parse_manual_rows, parse_recognizer_output, to_token
from .results import HistoryResultsLookup, NO_DRAW_DATA, StaticResultsLookup
from .verify import get_verifier

__all__ = [
    "ArithmeticOverflow",
    "GameType",
    "HistoryResultsLookup",
    "InputValidationError",
    "LimitExceeded",
    "NO_DRAW_DATA",
    "ResultsNotFound",
    "StaticResultsLookup",
    "Ticket",
    "TicketEvaluator",
    "TicketRow",
    "VerificationDetail",
    "VerificationError",
    "VerificationResult",
    "WinningNumbers",
    "evaluate_ticket",
    "get_config",
    "get_verifier",
    "parse_manual_rows",
    "parse_recognizer_output",
    "resolve_game_type",
    "to_token",
    "validate_ticket",
]
