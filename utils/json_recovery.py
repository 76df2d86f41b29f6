"""
Lenient JSON Recovery

Recovers a JSON array from free-form model output. Gemini is asked for
bare JSON but regularly wraps it in prose or code fences, or leaves
trailing commas behind, so parsing goes through a fixed repair pass
before giving up.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

from utils.monitoring import get_logger

logger = get_logger(__name__)

# Greedy: first "[" through last "]", so a successful parse is always a list
ARRAY_PATTERN = re.compile(r'\[[\s\S]*\]')

# Outcome reasons
EMPTY_INPUT = "empty_input"
NO_ARRAY = "no_array"
INVALID_JSON = "invalid_json"


@dataclass
class JsonArrayResult:
    """Outcome of a recovery attempt: parsed items, or why there are none."""

    items: List[Any] = field(default_factory=list)
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def _reject_constant(name: str):
    """NaN and Infinity are not JSON."""
    raise ValueError(f"non-standard JSON constant: {name}")


def repair_json_text(candidate: str) -> str:
    """
    Apply the fixed sequence of textual repairs.

    Handles:
    - Trailing commas before '}' and ']'
    - Literal backslash-n sequences (collapsed to a space)
    - Runs of whitespace (collapsed to one space)
    """
    repaired = re.sub(r',\s*}', '}', candidate)
    repaired = re.sub(r',\s*]', ']', repaired)
    repaired = repaired.replace('\\n', ' ')
    repaired = re.sub(r'\s+', ' ', repaired)
    return repaired.strip()


def parse_json_array(raw: Optional[str]) -> JsonArrayResult:
    """
    Locate, repair and parse the JSON array inside raw model text.

    Elements are returned as parsed; no schema validation is applied.

    Args:
        raw: Model output, possibly with surrounding prose

    Returns:
        JsonArrayResult with items, or an empty result carrying the reason
    """
    if not raw or not isinstance(raw, str):
        return JsonArrayResult(reason=EMPTY_INPUT)

    match = ARRAY_PATTERN.search(raw)
    if not match:
        return JsonArrayResult(reason=NO_ARRAY)

    try:
        parsed = json.loads(
            repair_json_text(match.group(0)),
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        logger.warning(f"JSON array parse error: {e.msg}", position=e.pos)
        return JsonArrayResult(reason=INVALID_JSON)
    except (ValueError, RecursionError) as e:
        logger.warning(f"JSON array parse error: {e}")
        return JsonArrayResult(reason=INVALID_JSON)

    return JsonArrayResult(items=parsed)


def extract_json_array(raw: Optional[str], label: str = "model output") -> List[Any]:
    """
    Best-effort extraction of a JSON array; empty list on any failure.

    Args:
        raw: Model output
        label: What the text was, for the failure log line
    """
    result = parse_json_array(raw)
    if not result.ok:
        logger.warning(f"❌ Could not recover JSON array from {label}", reason=result.reason)
    return result.items
