"""Payload for the (external) line-chart renderer.

The renderer is expected to draw two line datasets over the day labels and a
vertical line per annotation. Only plain dicts/lists are produced here so the
payload can be dumped straight to JSON.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from xp_calculator.data import AnnotationEvent, Cadence, DaySeries, Placement, PlayerProfile

POINTS_DATASET_LABEL = "Cumulative XP Points"
LEVEL_DATASET_LABEL = "Player Level"

# 50% alpha gold / silver / bronze / grey.
PLACEMENT_COLORS: Mapping[Placement, str] = {
    Placement.FIRST: "rgba(255, 215, 0, 0.5)",
    Placement.SECOND: "rgba(192, 192, 192, 0.5)",
    Placement.THIRD: "rgba(205, 127, 50, 0.5)",
    Placement.PARTICIPATION: "rgba(156, 163, 175, 0.5)",
}

_MARKER_STYLE: Mapping[Cadence, Dict[str, Any]] = {
    Cadence.WEEKLY: {"borderWidth": 0.5, "borderDash": [5, 5]},
    Cadence.MONTHLY: {"borderWidth": 1},
}


def chart_title(profile: PlayerProfile) -> str:
    return f"XP & Level Progress Over the Year - {profile.name} Player"


def annotation_descriptor(event: AnnotationEvent) -> Dict[str, Any]:
    if event.cadence not in _MARKER_STYLE:
        raise ValueError(f"No marker style for cadence {event.cadence.value!r}")

    x = event.day - 1  # category axis is 0-indexed
    descriptor: Dict[str, Any] = {
        "type": "line",
        "xMin": x,
        "xMax": x,
        "borderColor": PLACEMENT_COLORS[event.placement],
        "label": {"content": event.placement.initial, "enabled": False},
    }
    descriptor.update(_MARKER_STYLE[event.cadence])
    return descriptor


def build_chart_annotations(events: Iterable[AnnotationEvent]) -> Dict[str, Dict[str, Any]]:
    """Descriptors keyed ``{cadence}_{day}_{game_index}``."""

    annotations: Dict[str, Dict[str, Any]] = {}
    for event in events:
        if event.key in annotations:
            raise ValueError(f"Duplicate annotation key {event.key!r}")
        annotations[event.key] = annotation_descriptor(event)
    return annotations


def build_chart_payload(
    *,
    series: DaySeries,
    events: Iterable[AnnotationEvent],
    profile: PlayerProfile,
) -> Dict[str, Any]:
    return {
        "title": chart_title(profile),
        "labels": list(series.labels),
        "datasets": [
            {
                "label": POINTS_DATASET_LABEL,
                "data": list(series.cumulative_points),
                "yAxisID": "y",
            },
            {
                "label": LEVEL_DATASET_LABEL,
                "data": list(series.levels),
                "yAxisID": "y1",
            },
        ],
        "annotations": build_chart_annotations(events),
    }
