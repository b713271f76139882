import os
import logging
import requests
import pandas as pd
from datetime import datetime
from typing import Optional

from prizecheck.config import DATA_DIR, HISTORY_MAX_AGE_SECONDS, HISTORY_TIMEOUT_SECONDS
from prizecheck.lottery import GameType, get_config

logger = logging.getLogger(__name__)

HISTORY_URLS = {
    GameType.SSQ: "https://datachart.500.com/ssq/history/newinc/history.php?limit={limit}&sort=0",
    GameType.DLT: "https://datachart.500.com/dlt/history/newinc/history.php?limit={limit}&sort=0",
}

# Column positions in the 500.com history table
SSQ_COLUMNS = ([0, 1, 2, 3, 4, 5, 6, 7], ['issue', 'red1', 'red2', 'red3', 'red4', 'red5', 'red6', 'blue1'])
DLT_COLUMNS = ([0, 1, 2, 3, 4, 5, 6, 7], ['issue', 'red1', 'red2', 'red3', 'red4', 'red5', 'blue1', 'blue2'])

class LotteryFetcher:
    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.headers = {
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        }

    def fetch_data(self, game_type: GameType, limit: int = 100000) -> pd.DataFrame:
        if game_type not in HISTORY_URLS:
            raise ValueError(f"No draw history source for game type: {game_type.value}")
        url = HISTORY_URLS[game_type].format(limit=limit)
        logger.info("Fetching %s draw history from %s", game_type.value, url)
        response = self.session.get(url, headers=self.headers, timeout=HISTORY_TIMEOUT_SECONDS)
        response.raise_for_status()
        response.encoding = 'utf-8'

        dfs = pd.read_html(response.text)
        if not dfs:
            raise ValueError("No tables found in response")
        return clean_history(dfs[0], game_type)

def clean_history(df: pd.DataFrame, game_type: GameType) -> pd.DataFrame:
    """Reduce a raw history table to issue + red/blue columns, sorted by issue."""
    target_indices, column_names = SSQ_COLUMNS if game_type == GameType.SSQ else DLT_COLUMNS
    if df.shape[1] <= max(target_indices):
        raise ValueError(f"Table structure mismatch: expected {max(target_indices) + 1} columns, got {df.shape[1]}")

    df_subset = df.iloc[:, target_indices].copy()
    df_subset.columns = column_names

    # Drop header/footer rows; only numeric issues are draws
    df_subset['issue'] = df_subset['issue'].astype(str).str.strip()
    df_subset = df_subset[df_subset['issue'].str.match(r'^\d+$')]
    return df_subset.sort_values('issue', ascending=True).reset_index(drop=True)

def draw_tokens(draw: pd.Series, game_type: GameType) -> tuple[list[str], list[str]]:
    """Red and blue tokens ("02") of one history row."""
    config = get_config(game_type)
    reds = [f"{int(draw[f'red{j}']):02d}" for j in range(1, config.red_count + 1)]
    blues = [f"{int(draw[f'blue{j}']):02d}" for j in range(1, config.blue_count + 1)]
    return reds, blues

class DataLoader:
    def __init__(self, data_dir: str = DATA_DIR, fetcher: Optional[LotteryFetcher] = None,
                 max_age_seconds: int = HISTORY_MAX_AGE_SECONDS):
        self.data_dir = data_dir
        self.fetcher = fetcher or LotteryFetcher()
        self.max_age_seconds = max_age_seconds

    def get_data_path(self, game_type: GameType) -> str:
        return os.path.join(self.data_dir, f"{game_type.value}_history.csv")

    def is_stale(self, game_type: GameType) -> bool:
        path = self.get_data_path(game_type)
        if not os.path.exists(path):
            return True
        return (datetime.now().timestamp() - os.path.getmtime(path)) > self.max_age_seconds

    def load_data(self, game_type: GameType, force_update: bool = False) -> pd.DataFrame:
        path = self.get_data_path(game_type)

        if not force_update and not self.is_stale(game_type):
            return pd.read_csv(path, dtype={'issue': str})

        try:
            df = self.fetcher.fetch_data(game_type)
        except (requests.RequestException, ValueError) as e:
            if os.path.exists(path):
                logger.warning("Fetching %s history failed (%s); using cached %s", game_type.value, e, path)
                return pd.read_csv(path, dtype={'issue': str})
            raise

        os.makedirs(self.data_dir, exist_ok=True)
        df.to_csv(path, index=False)
        logger.info("Cached %d %s draws to %s", len(df), game_type.value, path)
        return df
