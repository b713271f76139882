import json

from prizecheck.config import configure_logging
from prizecheck.evaluator import TicketEvaluator
from prizecheck.models import Ticket, TicketRow

def main():
    configure_logging()
    evaluator = TicketEvaluator()

    tickets = [
        Ticket("双色球", "2025107", [
            TicketRow(["02", "11", "15", "21", "28", "33"], ["07"], multiplier=2),
            TicketRow(["02", "11", "15", "21", "28", "30", "33"], ["06", "07"], mode="复式"),
        ]),
        # No 大乐透 draw in the sample table: reported as an unknown issue
        Ticket("大乐透", "25107", [TicketRow(["01", "02", "03", "04", "05"], ["01", "02"])]),
        Ticket("即开型", "001", []),
    ]

    for res in evaluator.evaluate_batch(tickets):
        print(json.dumps(res.to_dict(), ensure_ascii=False, indent=2))

if __name__ == "__main__":
    main()
