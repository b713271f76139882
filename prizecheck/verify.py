import logging
from typing import Callable, Optional

from prizecheck.config import MAX_RED_TOKENS
from prizecheck.lottery import GameType, get_config
from prizecheck.models import TicketRow, WinningNumbers
from prizecheck.numbers import intersect_count, expand_combinations
from prizecheck.prize import PrizeCalculator, PL5_FIRST_PRIZE, level_name

logger = logging.getLogger(__name__)

STATUS_NO_WIN = "未中奖"

Verifier = Callable[[TicketRow, WinningNumbers], tuple[int, int, str]]


def _status(payout: int) -> str:
    if payout > 0:
        return f"中奖: {payout}元"
    return STATUS_NO_WIN


def verify_double_color(row: TicketRow, winning: WinningNumbers, *,
                        max_red_tokens: int = MAX_RED_TOKENS) -> tuple[int, int, str]:
    """
    双色球. A row with more than 6 reds (复式) is scored as every 6-number
    sub-ticket paired with every chosen blue; all winning pairs are paid.
    """
    base = get_config(GameType.SSQ).red_count
    red_combs = expand_combinations(row.red, base, max_red_tokens)
    winning_blue = winning.blue[0] if winning.blue else None

    best_level, total = 0, 0
    for red_comb in red_combs:
        red_hits = intersect_count(red_comb, winning.red)
        for b in row.blue:
            blue_hits = 1 if winning_blue is not None and b == winning_blue else 0
            prize = PrizeCalculator.calc_ssq(red_hits, blue_hits)
            if prize.amount > 0:
                total += prize.amount
                if best_level == 0 or prize.level < best_level:
                    best_level = prize.level

    logger.debug("ssq row %s+%s: %d sub-tickets, level %d, payout %d",
                 row.red, row.blue, len(red_combs), best_level, total)
    return best_level, total, _status(total)


def verify_lotto(row: TicketRow, winning: WinningNumbers) -> tuple[int, int, str]:
    """大乐透. Scored directly against the full row; multi-number rows are not expanded."""
    red_hits = intersect_count(row.red, winning.red)
    blue_hits = intersect_count(row.blue, winning.blue)
    prize = PrizeCalculator.calc_dlt(red_hits, blue_hits)
    return prize.level, prize.amount, _status(prize.amount)


def verify_permutation5(row: TicketRow, winning: WinningNumbers) -> tuple[int, int, str]:
    """排列5. All five digits must match position by position."""
    size = get_config(GameType.PL5).red_count
    if len(row.red) == size and len(winning.red) == size and tuple(row.red) == tuple(winning.red):
        return PL5_FIRST_PRIZE.level, PL5_FIRST_PRIZE.amount, level_name(PL5_FIRST_PRIZE.level)
    return 0, 0, STATUS_NO_WIN


VERIFIERS: dict[GameType, Verifier] = {
    GameType.SSQ: verify_double_color,
    GameType.DLT: verify_lotto,
    GameType.PL5: verify_permutation5,
}


def get_verifier(game_type: GameType) -> Optional[Verifier]:
    """Scoring function for ``game_type``; None for GameType.UNSUPPORTED."""
    return VERIFIERS.get(game_type)
