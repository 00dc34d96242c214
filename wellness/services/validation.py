"""
Domain range checks for metric values and goals.

validate_metric is a pure predicate; callers turn False into an
InvalidValueError (or MetricValueTooHighError when the value only
fails the upper bound) before anything is written.
"""
from __future__ import annotations

import enum
from typing import Any, Union

from wellness.core.errors import InvalidMetricKindError, InvalidValueError, MetricValueTooHighError


class MetricKind(str, enum.Enum):
    sleep = "sleep"
    water = "water"
    meditation = "meditation"

    @property
    def field(self) -> str:
        return _FIELDS[self]


_FIELDS = {
    MetricKind.sleep: "sleep_hours",
    MetricKind.water: "water_ml",
    MetricKind.meditation: "meditation_minutes",
}

# Inclusive bounds
METRIC_RANGES: dict[MetricKind, tuple[int, int]] = {
    MetricKind.sleep: (0, 24),
    MetricKind.water: (0, 10_000),
    MetricKind.meditation: (0, 1_440),
}


def parse_metric_kind(raw: Union[str, MetricKind]) -> MetricKind:
    if isinstance(raw, MetricKind):
        return raw
    try:
        return MetricKind(str(raw).strip().lower())
    except ValueError:
        raise InvalidMetricKindError(str(raw)) from None


def _is_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_metric(kind: Union[str, MetricKind], value: Any) -> bool:
    """True iff `kind` is a known metric and `value` lies in its range."""
    try:
        metric = parse_metric_kind(kind)
    except InvalidMetricKindError:
        return False
    if not _is_number(value):
        return False
    low, high = METRIC_RANGES[metric]
    return low <= value <= high


def check_metric(kind: MetricKind, value: Any, field: str | None = None) -> None:
    """Raise the matching InvalidValue error if validate_metric fails."""
    if validate_metric(kind, value):
        return
    field = field or kind.field
    high = METRIC_RANGES[kind][1]
    if _is_number(value) and value > high:
        raise MetricValueTooHighError(field=field, value=value, maximum=high)
    raise InvalidValueError(field=field, value=value)
