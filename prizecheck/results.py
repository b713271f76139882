import logging
import requests
from typing import Callable, Mapping, Optional

from prizecheck.data import DataLoader, draw_tokens, HISTORY_URLS
from prizecheck.errors import ResultsNotFound
from prizecheck.lottery import GameType
from prizecheck.models import WinningNumbers

logger = logging.getLogger(__name__)

# Raises ResultsNotFound for an unknown (game, issue) key
ResultsLookup = Callable[[GameType, str], WinningNumbers]

# Placeholder draw that matches nothing real; every row scores as no win
NO_DRAW_DATA = WinningNumbers(red=("00",), blue=("00",))

SAMPLE_RESULTS = {
    (GameType.SSQ, "2025107"): WinningNumbers(
        red=("02", "11", "15", "21", "28", "33"),
        blue=("07",)
    ),
}


def _issue_candidates(issue: str) -> list[str]:
    # 2025107 is printed on tickets, 25107 in the 500.com tables
    issue = str(issue).strip()
    candidates = [issue]
    if len(issue) == 7 and issue.isdigit():
        candidates.append(issue[2:])
    return candidates


class StaticResultsLookup:
    """In-memory table of known draws."""

    def __init__(self, results: Optional[Mapping[tuple[GameType, str], WinningNumbers]] = None,
                 fallback: Optional[WinningNumbers] = None):
        self.results = dict(SAMPLE_RESULTS if results is None else results)
        self.fallback = fallback

    def __call__(self, game_type: GameType, issue: str) -> WinningNumbers:
        key = (game_type, str(issue).strip())
        if key in self.results:
            return self.results[key]
        if self.fallback is not None:
            logger.info("No results for %s issue %s; using fallback draw", game_type.value, key[1])
            return self.fallback
        raise ResultsNotFound(game_type, key[1])


class HistoryResultsLookup:
    """Winning numbers read from the downloaded draw history."""

    def __init__(self, loader: Optional[DataLoader] = None, force_update: bool = False):
        self.loader = loader or DataLoader()
        self.force_update = force_update

    def __call__(self, game_type: GameType, issue: str) -> WinningNumbers:
        if game_type not in HISTORY_URLS:
            raise ResultsNotFound(game_type, issue)

        try:
            df = self.loader.load_data(game_type, force_update=self.force_update)
        except (requests.RequestException, ValueError) as e:
            # No download and no cache: the draw cannot be resolved
            logger.warning("Draw history for %s unavailable: %s", game_type.value, e)
            raise ResultsNotFound(game_type, str(issue).strip()) from e
        if df.empty:
            raise ResultsNotFound(game_type, issue)

        for candidate in _issue_candidates(issue):
            match = df[df['issue'].astype(str) == candidate]
            if not match.empty:
                reds, blues = draw_tokens(match.iloc[0], game_type)
                return WinningNumbers(red=reds, blue=blues)
        raise ResultsNotFound(game_type, str(issue).strip())
