import json
import re

from prizecheck.errors import InputValidationError
from prizecheck.lottery import GameType, get_config
from prizecheck.models import Ticket, TicketRow


def to_token(value) -> str:
    """
    Canonical number token.

    Integral numbers become two-digit zero-padded strings (7 -> "07", 7.0 -> "07");
    strings are only trimmed. Anything else falls back to ``str(value)``.
    """
    if value is None or isinstance(value, bool):
        raise InputValidationError(f"not a lottery number: {value!r}")
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, int):
        return f"{value:02d}"
    if isinstance(value, float):
        if not value.is_integer():
            raise InputValidationError(f"not a whole number: {value!r}")
        return f"{int(value):02d}"
    return str(value)


def _strip_fence(text: str) -> str:
    text = text.strip()
    for prefix in ("```json", "```"):
        if text.startswith(prefix):
            text = text[len(prefix):]
            break
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _load_json(text: str):
    text = _strip_fence(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # Prose around the payload: keep the outermost array or object,
    # whichever opens first
    spans = []
    for open_char, close_char in (("[", "]"), ("{", "}")):
        first, last = text.find(open_char), text.rfind(close_char)
        if first != -1 and last > first:
            spans.append((first, last))
    for first, last in sorted(spans):
        try:
            return json.loads(text[first:last + 1])
        except json.JSONDecodeError:
            continue
    raise InputValidationError(f"recognizer output is not valid JSON: {text[:80]!r}")


def _multiplier(value) -> int:
    # Tickets without a printed multiplier are single stake
    if value in (None, "", 0):
        return 1
    if isinstance(value, float) and not value.is_integer():
        raise InputValidationError(f"bad multiplier: {value!r}")
    try:
        multiplier = int(value)
    except (TypeError, ValueError):
        raise InputValidationError(f"bad multiplier: {value!r}")
    if multiplier < 1:
        raise InputValidationError(f"bad multiplier: {value!r}")
    return multiplier


def _parse_row(raw: dict) -> TicketRow:
    if not isinstance(raw, dict):
        raise InputValidationError(f"ticket row must be an object, got {type(raw).__name__}")
    return TicketRow(
        red=[to_token(v) for v in raw.get("red") or []],
        blue=[to_token(v) for v in raw.get("blue") or []],
        multiplier=_multiplier(raw.get("multiplier")),
        mode=str(raw.get("mode") or "")
    )


def parse_recognizer_output(text: str) -> list[Ticket]:
    """Parse the recognizer's reply into tickets with normalized tokens."""
    data = _load_json(text)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise InputValidationError("recognizer output must be a ticket object or an array of them")

    tickets = []
    for raw in data:
        if not isinstance(raw, dict):
            raise InputValidationError(f"ticket must be an object, got {type(raw).__name__}")
        tickets.append(Ticket(
            game_label=str(raw.get("type") or "").strip(),
            issue=str(raw.get("issue") or "").strip(),
            rows=[_parse_row(r) for r in raw.get("tickets") or []]
        ))
    return tickets


_MULTIPLIER_RE = re.compile(r"\s*[x×*]\s*(\d+)\s*$", re.IGNORECASE)


def _split_numbers(part: str, pad: bool) -> list[str]:
    tokens = [t for t in re.split(r"[\s,，]+", part.strip()) if t]
    for t in tokens:
        if not t.isdigit():
            raise InputValidationError(f"not a number: {t!r}")
    if not pad:
        if any(len(t) != 1 for t in tokens):
            raise InputValidationError(f"expected single digits: {part.strip()!r}")
        return tokens
    return [to_token(int(t)) for t in tokens]


def parse_manual_rows(text: str, game_type: GameType) -> list[TicketRow]:
    """
    Rows typed one per line: ``01 05 12 18 25 30 + 08 x2``.

    Red and blue parts are separated by "+", the optional "x N" suffix is the
    multiplier. Ordered games (排列5) keep single digits: ``1 2 3 4 5``.
    """
    ordered = game_type != GameType.UNSUPPORTED and get_config(game_type).ordered
    rows = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        multiplier = 1
        m = _MULTIPLIER_RE.search(line)
        if m:
            multiplier = _multiplier(m.group(1))
            line = line[:m.start()]
        red_part, _, blue_part = line.partition("+")
        rows.append(TicketRow(
            red=_split_numbers(red_part, pad=not ordered),
            blue=_split_numbers(blue_part, pad=not ordered),
            multiplier=multiplier
        ))
    return rows
