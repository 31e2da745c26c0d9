"""Event parser for the Temporal controller - converts history protos into records."""

from __future__ import annotations

import logging
from typing import Any

from google.protobuf.json_format import MessageToDict
from temporalio.api.enums.v1 import EventType

from tuiporal.controllers.temporal.parsers.workflow_parser import timestamp_to_datetime
from tuiporal.models.core.history_event import HistoryEvent

logger = logging.getLogger(__name__)


class EventParser:
    """Parses ``temporal.api.history.v1.HistoryEvent`` messages."""

    _EVENT_TYPE_PREFIX = "EVENT_TYPE_"
    _ATTRIBUTES_ONEOF = "attributes"

    def event_type_name(self, value: int) -> str:
        """Return the CamelCase name of an event type number.

        ``EVENT_TYPE_WORKFLOW_EXECUTION_STARTED`` becomes
        ``WorkflowExecutionStarted``. Unknown numbers render as
        ``Unknown(<n>)``.
        """
        try:
            name = EventType.Name(value)
        except ValueError:
            return f"Unknown({value})"
        name = name.removeprefix(self._EVENT_TYPE_PREFIX)
        return "".join(part.capitalize() for part in name.split("_"))

    def parse_attributes(self, event: Any) -> tuple[dict[str, Any], str | None]:
        """Extract the attribute bag of an event.

        Returns:
            Tuple of (attributes, raw). ``raw`` is only set when the event
            carries no recognised attribute payload.
        """
        which = event.WhichOneof(self._ATTRIBUTES_ONEOF)
        if which is None:
            return {}, str(event) or None
        payload = getattr(event, which)
        return MessageToDict(payload), None

    def parse_event(self, event: Any) -> HistoryEvent:
        attributes, raw = self.parse_attributes(event)
        return HistoryEvent(
            event_id=int(event.event_id),
            event_type=self.event_type_name(int(event.event_type)),
            event_time=timestamp_to_datetime(event, "event_time"),
            attributes=attributes,
            raw=raw,
        )

    def parse_events(self, events: Any) -> tuple[HistoryEvent, ...]:
        return tuple(self.parse_event(event) for event in events)
