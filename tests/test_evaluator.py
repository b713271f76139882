import pytest

from prizecheck import verify
from prizecheck.config import MAX_PAYOUT
from prizecheck.errors import ArithmeticOverflow, InputValidationError, LimitExceeded
from prizecheck.evaluator import TicketEvaluator, evaluate_ticket, validate_ticket, STATUS_UNSUPPORTED
from prizecheck.lottery import GameType
from prizecheck.models import Ticket, TicketRow, WinningNumbers
from prizecheck.results import StaticResultsLookup, NO_DRAW_DATA

SSQ_WIN = WinningNumbers(red=["02", "11", "15", "21", "28", "33"], blue=["07"])
DLT_WIN = WinningNumbers(red=["01", "02", "03", "04", "05"], blue=["01", "02"])

class RecordingLookup:
    def __init__(self, results):
        self.inner = StaticResultsLookup(results)
        self.calls = []

    def __call__(self, game_type, issue):
        self.calls.append((game_type, issue))
        return self.inner(game_type, issue)

def test_rows_are_multiplied_and_totalled():
    ticket = Ticket("双色球", "2025107", [
        TicketRow(["02", "11", "15", "21", "28", "33"], ["07"], multiplier=2),
        TicketRow(["02", "11", "15", "21", "28", "33"], ["06"]),
        TicketRow(["01", "03", "04", "05", "06", "08"], ["09"], multiplier=5),
    ])
    res = evaluate_ticket(ticket, SSQ_WIN)
    assert res.game_type == GameType.SSQ
    assert res.total_prize == 2 * 5000000 + 100000
    assert [(d.row_index, d.level, d.prize) for d in res.details] == [
        (1, 1, 10000000),
        (2, 2, 100000),
        (3, 0, 0),
    ]
    assert res.details[2].status == "未中奖"
    assert res.error is None

def test_unsupported_game_records_detail_without_scoring(monkeypatch):
    def boom(row, winning):
        raise AssertionError("verifier must not run")
    for game_type in list(verify.VERIFIERS):
        monkeypatch.setitem(verify.VERIFIERS, game_type, boom)

    lookup = RecordingLookup({})
    ticket = Ticket("Scratch-off", "001", [TicketRow(["01"], [])])
    res = TicketEvaluator(lookup).evaluate(ticket)
    assert lookup.calls == []
    assert res.game_type == GameType.UNSUPPORTED
    assert res.total_prize == 0
    assert len(res.details) == 1
    assert res.details[0].status == STATUS_UNSUPPORTED
    assert res.details[0].prize == 0

def test_evaluator_uses_lookup():
    lookup = RecordingLookup({(GameType.DLT, "25107"): DLT_WIN})
    ticket = Ticket("超级大乐透", " 25107 ", [TicketRow(["01", "02", "03", "04", "05"], ["01", "02"])])
    res = TicketEvaluator(lookup).evaluate(ticket)
    assert lookup.calls == [(GameType.DLT, " 25107 ")]
    assert res.total_prize == 10000000

def test_placeholder_draw_scores_no_win():
    evaluator = TicketEvaluator(StaticResultsLookup({}, fallback=NO_DRAW_DATA))
    ticket = Ticket("双色球", "1999001", [TicketRow(["02", "11", "15", "21", "28", "33"], ["07"])])
    res = evaluator.evaluate(ticket)
    assert res.total_prize == 0
    assert res.details[0].status == "未中奖"

def test_payout_overflow_is_reported():
    ticket = Ticket("大乐透", "1", [
        TicketRow(["01", "02", "03", "04", "05"], ["01", "02"], multiplier=MAX_PAYOUT // 10000000 + 1),
    ])
    with pytest.raises(ArithmeticOverflow):
        evaluate_ticket(ticket, DLT_WIN)

def test_total_overflow_is_reported():
    row = TicketRow(["01", "02", "03", "04", "05"], ["01", "02"], multiplier=MAX_PAYOUT // 10000000)
    with pytest.raises(ArithmeticOverflow):
        evaluate_ticket(Ticket("大乐透", "1", [row, row]), DLT_WIN)

def test_multiplier_below_one_is_rejected():
    ticket = Ticket("大乐透", "1", [TicketRow(["01", "02", "03", "04", "05"], ["01", "02"], multiplier=0)])
    with pytest.raises(InputValidationError):
        evaluate_ticket(ticket, DLT_WIN)

def test_oversized_row_fails_the_ticket():
    ticket = Ticket("双色球", "2025107", [TicketRow([f"{i:02d}" for i in range(1, 34)], ["07"])])
    with pytest.raises(LimitExceeded):
        evaluate_ticket(ticket, SSQ_WIN)

def test_batch_isolates_failures():
    lookup = StaticResultsLookup({(GameType.SSQ, "2025107"): SSQ_WIN})
    tickets = [
        Ticket("双色球", "2025107", [TicketRow([f"{i:02d}" for i in range(1, 34)], ["07"])]),
        Ticket("双色球", "2025107", [TicketRow(["02", "11", "15", "21", "28", "33"], ["07"])]),
        Ticket("双色球", "1999001", [TicketRow(["02", "11", "15", "21", "28", "33"], ["07"])]),
        Ticket("即开型", "001", []),
    ]
    results = TicketEvaluator(lookup).evaluate_batch(tickets)

    assert [r.ticket_index for r in results] == [1, 2, 3, 4]
    assert "expansion limit" in results[0].error
    assert results[0].total_prize == 0
    assert results[1].error is None
    assert results[1].total_prize == 5000000
    assert "1999001" in results[2].error
    assert results[3].details[0].status == STATUS_UNSUPPORTED

def test_result_to_dict_shape():
    ticket = Ticket("双色球", "2025107", [TicketRow(["02", "11", "15", "21", "28", "33"], ["07"], mode="单式")])
    data = evaluate_ticket(ticket, SSQ_WIN, ticket_index=3).to_dict()
    assert data == {
        "ticket_index": 3,
        "ocr_data": {
            "type": "双色球",
            "issue": "2025107",
            "tickets": [{"red": ["02", "11", "15", "21", "28", "33"], "blue": ["07"], "multiplier": 1, "mode": "单式"}],
        },
        "total_prize": 5000000,
        "details": [{"row_index": 1, "level": 1, "prize": 5000000, "status": "中奖: 5000000元"}],
    }

# --- strict validation ---

def test_validate_accepts_well_formed_tickets():
    assert validate_ticket(Ticket("双色球", "1", [
        TicketRow(["02", "11", "15", "21", "28", "33", "30"], ["07", "16"]),
    ])) == GameType.SSQ
    assert validate_ticket(Ticket("排列5", "1", [TicketRow(["0", "9", "3", "4", "5"])])) == GameType.PL5

@pytest.mark.parametrize("ticket", [
    Ticket("双色球", "1", [TicketRow(["02", "11", "15", "21", "28"], ["07"])]),
    Ticket("双色球", "1", [TicketRow(["02", "11", "15", "21", "28", "34"], ["07"])]),
    Ticket("双色球", "1", [TicketRow(["02", "02", "15", "21", "28", "33"], ["07"])]),
    Ticket("大乐透", "1", [TicketRow(["01", "02", "03", "04", "05"], ["01"])]),
    Ticket("排列5", "1", [TicketRow(["1", "2", "3", "4", "5"], ["1"])]),
    Ticket("排列5", "1", [TicketRow(["1", "2", "3", "4", "x"])]),
    Ticket("大乐透", "1", []),
    Ticket("Scratch-off", "1", [TicketRow(["01"])]),
])
def test_validate_rejects_malformed_tickets(ticket):
    with pytest.raises(InputValidationError):
        validate_ticket(ticket)

def test_default_lookup_reports_unknown_dlt_issue():
    results = TicketEvaluator().evaluate_batch([
        Ticket("大乐透", "25107", [TicketRow(["01", "02", "03", "04", "05"], ["01", "02"])]),
    ])
    assert "25107" in results[0].error
