# analytics.py
"""Offline summary of chat events exported from the page.

The page keeps its events in browser storage and can download them as a JSON
file; these helpers read such a file and compute the same counters the page
shows.
"""
import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class ClientEvent(BaseModel):
    event: str
    properties: Dict[str, Union[str, int, float, bool]] = Field(default_factory=dict)
    timestamp: str
    session_id: str = Field(..., alias="sessionId")

    model_config = ConfigDict(populate_by_name=True)


class AnalyticsSummary(BaseModel):
    total_events: int = Field(0, serialization_alias="totalEvents")
    unique_sessions: int = Field(0, serialization_alias="uniqueSessions")
    first_interactions: int = Field(0, serialization_alias="firstInteractions")
    messages_sent: int = Field(0, serialization_alias="messagesSent")
    input_focuses: int = Field(0, serialization_alias="inputFocuses")
    errors_count: int = Field(0, serialization_alias="errorsCount")
    conversation_starts: int = Field(0, serialization_alias="conversationStarts")
    last_activity: Optional[str] = Field(None, serialization_alias="lastActivity")


def load_events(path: Union[str, Path]) -> List[ClientEvent]:
    """Read an exported events file. Unreadable files give an empty list."""
    try:
        raw: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read events from %s: %s", path, e)
        return []
    if not isinstance(raw, list):
        return []

    events: List[ClientEvent] = []
    for item in raw:
        try:
            events.append(ClientEvent.model_validate(item))
        except ValidationError:
            logger.debug("Skipping malformed event: %r", item)
    return events


def summarize_events(events: Iterable[ClientEvent]) -> AnalyticsSummary:
    events = list(events)

    def count(name: str) -> int:
        return sum(1 for e in events if e.event == name)

    return AnalyticsSummary(
        total_events=len(events),
        unique_sessions=len({e.session_id for e in events}),
        first_interactions=count("chat_first_interaction"),
        messages_sent=count("chat_message_sent"),
        input_focuses=count("chat_input_focused"),
        errors_count=count("chat_error"),
        conversation_starts=count("chat_page_loaded"),
        last_activity=events[-1].timestamp if events else None,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Summarize an exported chat events file")
    parser.add_argument("path", help="JSON file downloaded from the page")
    args = parser.parse_args(argv)

    summary = summarize_events(load_events(args.path))
    print(json.dumps(summary.model_dump(by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
