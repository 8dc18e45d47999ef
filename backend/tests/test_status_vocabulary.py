import pytest

from statusboard.exceptions import UnknownStatusCodeError
from statusboard.services.status_vocabulary import (
    LabelSet,
    StatusCode,
    status_class,
    status_label,
    to_status_code,
)


@pytest.mark.parametrize("code", list(StatusCode))
@pytest.mark.parametrize("label_set", list(LabelSet))
def test_every_code_has_label_and_class(code, label_set):
    assert status_label(int(code), label_set)
    assert status_class(int(code))


def test_generic_labels():
    assert [status_label(c) for c in range(4)] == ["OK", "WARNING", "CRITICAL", "UNKNOWN"]


def test_line_labels():
    assert [status_label(c, LabelSet.LINES) for c in range(4)] == [
        "LINES AVAILABLE", "SOME ISSUES", "LINES DOWN", "UNKNOWN"
    ]


def test_classes_shared_by_both_views():
    assert [status_class(c) for c in range(4)] == [
        "label-success", "label-warning", "label-danger", "label-default"
    ]


@pytest.mark.parametrize("value", [4, 5, -1, None, "0", 1.0, True])
def test_unknown_codes_fail(value):
    with pytest.raises(UnknownStatusCodeError) as exc_info:
        to_status_code(value)
    assert exc_info.value.value == value


def test_unknown_code_is_value_error():
    with pytest.raises(ValueError):
        status_label(5)
