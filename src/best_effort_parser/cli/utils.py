from __future__ import annotations

import json
from typing import Any, List, Optional

from best_effort_parser.config import get_config
from best_effort_parser.logger import get_logger, set_debug

log = get_logger("cli")


def join_words(words: Optional[List[str]]) -> str:
    """Command-line words are concatenated with single spaces, as typed."""
    return " ".join(words or [])


def prepare(debug: bool) -> None:
    if debug or get_config().debug:
        set_debug(True)
        log.debug("Debug logging enabled")


def resolve_pretty(pretty: Optional[bool]) -> bool:
    if pretty is None:
        return bool(get_config().output.get("pretty", False))
    return pretty


def dump_json(data: Any, *, pretty: bool) -> str:
    """
    Serialize to JSON for stdout.
    """
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
