# SPDX-License-Identifier: MIT


class EventType:
    MEETING = "meeting"
    CALL = "call"
    INTERNAL = "internal"
    DEADLINE = "deadline"
    OTHER = "other"


EVENT_TYPES: tuple[str, ...] = (
    EventType.MEETING,
    EventType.CALL,
    EventType.INTERNAL,
    EventType.DEADLINE,
    EventType.OTHER,
)

EVENT_TYPE_LABELS: dict[str, str] = {
    EventType.MEETING: "Client Meeting",
    EventType.CALL: "Call",
    EventType.INTERNAL: "Internal Meeting",
    EventType.DEADLINE: "Deadline",
    EventType.OTHER: "Other",
}

EVENT_TYPE_COLORS: dict[str, str] = {
    EventType.MEETING: "blue",
    EventType.CALL: "green",
    EventType.INTERNAL: "purple",
    EventType.DEADLINE: "red",
    EventType.OTHER: "grey50",
}


def event_type_label(event_type: str) -> str:
    return EVENT_TYPE_LABELS.get(event_type, EVENT_TYPE_LABELS[EventType.OTHER])


def event_type_color(event_type: str) -> str:
    return EVENT_TYPE_COLORS.get(event_type, EVENT_TYPE_COLORS[EventType.OTHER])
