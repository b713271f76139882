"""Exceptions raised while verifying tickets."""


class VerificationError(Exception):
    """Base class for every error the prize checker reports."""


class LimitExceeded(VerificationError):
    """A multi-number row has too many red numbers to expand."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"{count} red numbers exceeds the expansion limit of {limit}")


class ArithmeticOverflow(VerificationError):
    """A payout no longer fits the integer width used downstream."""

    def __init__(self, value: int, limit: int):
        self.value = value
        self.limit = limit
        super().__init__(f"payout {value} exceeds the maximum of {limit}")


class InputValidationError(VerificationError, ValueError):
    """Ticket or recognizer input does not have the expected shape."""


class ResultsNotFound(VerificationError, LookupError):
    """No winning numbers are known for a (game, issue) key."""

    def __init__(self, game_type, issue: str):
        self.game_type = game_type
        self.issue = issue
        name = getattr(game_type, "value", game_type)
        super().__init__(f"no draw results for {name} issue {issue!r}")
