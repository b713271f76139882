from dataclasses import dataclass
from prizecheck.lottery import GameType

@dataclass(frozen=True)
class PrizeResult:
    level: int       # 奖级 (1 = 一等奖, 0 = 未中奖)
    amount: int      # 单注奖金 (浮动奖按固定值计)
    description: str # 描述 (如 "6+1")

NO_PRIZE = PrizeResult(0, 0, "未达标")

LEVEL_NAMES = {
    0: "未中奖", 1: "一等奖", 2: "二等奖", 3: "三等奖", 4: "四等奖",
    5: "五等奖", 6: "六等奖", 7: "七等奖", 8: "八等奖", 9: "九等奖",
}

# 双色球: (红球命中, 蓝球命中) -> 奖级
SSQ_TIERS = {
    (6, 1): PrizeResult(1, 5000000, "6+1"),
    (6, 0): PrizeResult(2, 100000, "6+0"),
    (5, 1): PrizeResult(3, 3000, "5+1"),
    (5, 0): PrizeResult(4, 200, "5+0"),
    (4, 1): PrizeResult(4, 200, "4+1"),
    (4, 0): PrizeResult(5, 10, "4+0"),
    (3, 1): PrizeResult(5, 10, "3+1"),
}
SSQ_BLUE_ONLY = PrizeResult(6, 5, "0+1, 1+1, 2+1")

# 大乐透: (前区命中, 后区命中) -> 奖级
DLT_TIERS = {
    (5, 2): PrizeResult(1, 10000000, "5+2"),
    (5, 1): PrizeResult(2, 200000, "5+1"),
    (5, 0): PrizeResult(3, 10000, "5+0"),
    (4, 2): PrizeResult(4, 3000, "4+2"),
    (4, 1): PrizeResult(5, 300, "4+1"),
    (3, 2): PrizeResult(6, 200, "3+2"),
    (4, 0): PrizeResult(7, 100, "4+0"),
    (3, 1): PrizeResult(8, 15, "3+1"),
    (2, 2): PrizeResult(8, 15, "2+2"),
    (3, 0): PrizeResult(9, 5, "3+0"),
    (2, 1): PrizeResult(9, 5, "2+1"),
    (1, 2): PrizeResult(9, 5, "1+2"),
    (0, 2): PrizeResult(9, 5, "0+2"),
}

# 排列5: 五位按位全中
PL5_FIRST_PRIZE = PrizeResult(1, 100000, "直选5位")

def level_name(level: int) -> str:
    return LEVEL_NAMES.get(level, f"{level}等奖")

class PrizeCalculator:
    @staticmethod
    def calc_ssq(red_hits: int, blue_hits: int) -> PrizeResult:
        """双色球奖金计算"""
        prize = SSQ_TIERS.get((red_hits, blue_hits))
        if prize is not None:
            return prize
        if blue_hits == 1:
            return SSQ_BLUE_ONLY
        return NO_PRIZE

    @staticmethod
    def calc_dlt(red_hits: int, blue_hits: int) -> PrizeResult:
        """大乐透奖金计算 (常规规则)"""
        return DLT_TIERS.get((red_hits, blue_hits), NO_PRIZE)

    @staticmethod
    def calculate(game_type: GameType, red_hits: int, blue_hits: int) -> PrizeResult:
        if game_type == GameType.SSQ:
            return PrizeCalculator.calc_ssq(red_hits, blue_hits)
        elif game_type == GameType.DLT:
            return PrizeCalculator.calc_dlt(red_hits, blue_hits)
        else:
            # PL5 is positional and has no hit-count table
            return NO_PRIZE
