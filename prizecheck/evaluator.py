import logging
from typing import Iterable, Optional

from prizecheck.config import MAX_PAYOUT, MAX_RED_TOKENS
from prizecheck.errors import ArithmeticOverflow, InputValidationError, VerificationError
from prizecheck.lottery import GameType, get_config, resolve_game_type
from prizecheck.models import Ticket, TicketRow, VerificationDetail, VerificationResult, WinningNumbers
from prizecheck.results import ResultsLookup, StaticResultsLookup
from prizecheck.verify import get_verifier

logger = logging.getLogger(__name__)

STATUS_UNSUPPORTED = "暂不支持该彩种验奖"


def checked_mul(amount: int, multiplier: int, limit: int = MAX_PAYOUT) -> int:
    value = amount * multiplier
    if value > limit:
        raise ArithmeticOverflow(value, limit)
    return value


def checked_add(total: int, amount: int, limit: int = MAX_PAYOUT) -> int:
    value = total + amount
    if value > limit:
        raise ArithmeticOverflow(value, limit)
    return value


def unsupported_result(ticket: Ticket, ticket_index: int = 1) -> VerificationResult:
    return VerificationResult(
        ticket_index=ticket_index,
        ticket=ticket,
        game_type=GameType.UNSUPPORTED,
        total_prize=0,
        details=(VerificationDetail(row_index=0, level=0, prize=0, status=STATUS_UNSUPPORTED),)
    )


def evaluate_ticket(ticket: Ticket, winning: WinningNumbers, ticket_index: int = 1) -> VerificationResult:
    """Score every row of ``ticket`` against ``winning`` and total the multiplied prizes."""
    game_type = resolve_game_type(ticket.game_label)
    verifier = get_verifier(game_type)
    if verifier is None:
        return unsupported_result(ticket, ticket_index)

    total = 0
    details = []
    for row_index, row in enumerate(ticket.rows, start=1):
        if row.multiplier < 1:
            raise InputValidationError(f"row {row_index}: multiplier must be at least 1, got {row.multiplier}")
        level, payout, status = verifier(row, winning)
        prize = checked_mul(payout, row.multiplier)
        total = checked_add(total, prize)
        details.append(VerificationDetail(row_index=row_index, level=level, prize=prize, status=status))

    return VerificationResult(
        ticket_index=ticket_index,
        ticket=ticket,
        game_type=game_type,
        total_prize=total,
        details=tuple(details)
    )


class TicketEvaluator:
    def __init__(self, lookup: Optional[ResultsLookup] = None):
        self.lookup = lookup or StaticResultsLookup()

    def evaluate(self, ticket: Ticket, ticket_index: int = 1) -> VerificationResult:
        game_type = resolve_game_type(ticket.game_label)
        if game_type == GameType.UNSUPPORTED:
            logger.info("Ticket %d: unsupported game %r", ticket_index, ticket.game_label)
            return unsupported_result(ticket, ticket_index)

        winning = self.lookup(game_type, ticket.issue)
        return evaluate_ticket(ticket, winning, ticket_index)

    def evaluate_batch(self, tickets: Iterable[Ticket]) -> list[VerificationResult]:
        """Evaluate tickets independently; a failing ticket is reported on its own result."""
        results = []
        for idx, ticket in enumerate(tickets, start=1):
            try:
                results.append(self.evaluate(ticket, idx))
            except VerificationError as e:
                logger.warning("Ticket %d (%s %s) failed: %s", idx, ticket.game_label, ticket.issue, e)
                results.append(VerificationResult(
                    ticket_index=idx,
                    ticket=ticket,
                    game_type=resolve_game_type(ticket.game_label),
                    error=str(e)
                ))

        total = sum(r.total_prize for r in results)
        logger.info("Verified %d tickets, total prize %d", len(results), total)
        return results


def _check_tokens(tokens, number_range, what: str, row_index: int):
    low, high = number_range
    for token in tokens:
        if not token.isdigit() or not (low <= int(token) <= high):
            raise InputValidationError(f"row {row_index}: {what} number {token!r} outside {low}-{high}")


def _validate_row(row: TicketRow, game_type: GameType, row_index: int):
    config = get_config(game_type)
    if row.multiplier < 1:
        raise InputValidationError(f"row {row_index}: multiplier must be at least 1, got {row.multiplier}")

    if config.ordered:
        if len(row.red) != config.red_count or row.blue:
            raise InputValidationError(
                f"row {row_index}: expected exactly {config.red_count} digits, got {len(row.red)}+{len(row.blue)}")
    else:
        if len(row.red) < config.red_count or len(row.blue) < config.blue_count:
            raise InputValidationError(
                f"row {row_index}: expected at least {config.red_count}+{config.blue_count} numbers, "
                f"got {len(row.red)}+{len(row.blue)}")
        if game_type == GameType.SSQ and len(row.red) > MAX_RED_TOKENS:
            raise InputValidationError(f"row {row_index}: at most {MAX_RED_TOKENS} red numbers, got {len(row.red)}")
        if len(set(row.red)) != len(row.red) or len(set(row.blue)) != len(row.blue):
            raise InputValidationError(f"row {row_index}: duplicate numbers")

    _check_tokens(row.red, config.red_range, "red", row_index)
    _check_tokens(row.blue, config.blue_range, "blue", row_index)


def validate_ticket(ticket: Ticket) -> GameType:
    """
    Strict shape check for callers that want to reject malformed rows up front.
    The scoring path itself tolerates them as non-winning.
    """
    game_type = resolve_game_type(ticket.game_label)
    if game_type == GameType.UNSUPPORTED:
        raise InputValidationError(f"unsupported game: {ticket.game_label!r}")
    if not ticket.rows:
        raise InputValidationError("ticket has no rows")
    for row_index, row in enumerate(ticket.rows, start=1):
        _validate_row(row, game_type, row_index)
    return game_type
