from enum import Enum
from dataclasses import dataclass

class GameType(Enum):
    SSQ = "ssq"          # 双色球 (double color)
    DLT = "dlt"          # 大乐透 (super lotto)
    PL5 = "pl5"          # 排列5 (permutation 5)
    UNSUPPORTED = "unsupported"

@dataclass(frozen=True)
class LotteryConfig:
    name: str
    cn_name: str
    red_range: tuple[int, int]
    red_count: int
    blue_range: tuple[int, int]
    blue_count: int
    ordered: bool = False   # position-sensitive match (PL5 digits)

GAME_CONFIGS = {
    GameType.SSQ: LotteryConfig(
        name="ssq",
        cn_name="双色球",
        red_range=(1, 33),
        red_count=6,
        blue_range=(1, 16),
        blue_count=1
    ),
    GameType.DLT: LotteryConfig(
        name="dlt",
        cn_name="大乐透",
        red_range=(1, 35),
        red_count=5,
        blue_range=(1, 12),
        blue_count=2
    ),
    GameType.PL5: LotteryConfig(
        name="pl5",
        cn_name="排列5",
        red_range=(0, 9),
        red_count=5,
        blue_range=(0, 0),
        blue_count=0,
        ordered=True
    )
}

# Checked in this order; the first label contained in the free text wins
LABEL_PRIORITY = [GameType.SSQ, GameType.DLT, GameType.PL5]

def get_config(game_type: GameType) -> LotteryConfig:
    return GAME_CONFIGS[game_type]

def resolve_game_type(label: str) -> GameType:
    """Map a free-text game label (e.g. "中国福利彩票 双色球") to a GameType."""
    label = label or ""
    for game_type in LABEL_PRIORITY:
        if GAME_CONFIGS[game_type].cn_name in label:
            return game_type
    return GameType.UNSUPPORTED
