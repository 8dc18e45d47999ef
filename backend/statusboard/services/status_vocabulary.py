"""
Labels and presentation classes for monitoring state codes.

Two label sets exist: the generic one used on the history page and the
line-oriented one used on the current status page. Both share the same
Bootstrap label classes.
"""
import enum
from typing import Dict

from statusboard.exceptions import UnknownStatusCodeError


class StatusCode(int, enum.Enum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class LabelSet(str, enum.Enum):
    GENERIC = "generic"
    LINES = "lines"


LABELS: Dict[LabelSet, Dict[StatusCode, str]] = {
    LabelSet.GENERIC: {
        StatusCode.OK: "OK",
        StatusCode.WARNING: "WARNING",
        StatusCode.CRITICAL: "CRITICAL",
        StatusCode.UNKNOWN: "UNKNOWN",
    },
    LabelSet.LINES: {
        StatusCode.OK: "LINES AVAILABLE",
        StatusCode.WARNING: "SOME ISSUES",
        StatusCode.CRITICAL: "LINES DOWN",
        StatusCode.UNKNOWN: "UNKNOWN",
    },
}

CSS_CLASSES: Dict[StatusCode, str] = {
    StatusCode.OK: "label-success",
    StatusCode.WARNING: "label-warning",
    StatusCode.CRITICAL: "label-danger",
    StatusCode.UNKNOWN: "label-default",
}


def to_status_code(value) -> StatusCode:
    """
    Convert a raw `state` column value into a StatusCode.

    Raises:
        UnknownStatusCodeError: for anything outside 0..3, including
            booleans and non-integers
    """
    if isinstance(value, StatusCode):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnknownStatusCodeError(value)
    try:
        return StatusCode(value)
    except ValueError:
        raise UnknownStatusCodeError(value) from None


def status_label(value, label_set: LabelSet = LabelSet.GENERIC) -> str:
    return LABELS[label_set][to_status_code(value)]


def status_class(value) -> str:
    return CSS_CLASSES[to_status_code(value)]
