"""Server-sent events framing for progress streams."""
from typing import Iterable, Iterator

from pydantic import BaseModel

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def format_event(event: BaseModel) -> str:
    return f"data: {event.model_dump_json()}\n\n"


def stream_events(events: Iterable[BaseModel]) -> Iterator[str]:
    for event in events:
        yield format_event(event)
