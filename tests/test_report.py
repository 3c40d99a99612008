import threading
from datetime import datetime

import pytest

from stribot.domain.models import MinMax, SourceOutcome, TempReading
from stribot.errors import StatusError, TransportError
from stribot.service.report import current_report, lookup_current, minmax_report


class StubSource:
    def __init__(self, name, value=None, error=None, barrier=None):
        self.name = name
        self._value = value
        self._error = error
        self._barrier = barrier
        self.thread_name = None

    def current_temperature(self):
        self.thread_name = threading.current_thread().name
        if self._barrier is not None:
            self._barrier.wait(timeout=5)
        if self._error is not None:
            raise self._error
        return self._value


def test_lookup_current_success():
    outcome = lookup_current(StubSource("TGK", value=-10.6))
    assert outcome == SourceOutcome(source="TGK", value=-10.6)
    assert outcome.ok


def test_lookup_current_captures_extraction_error():
    error = StatusError("http://tgk1.org", 502)
    outcome = lookup_current(StubSource("TGK", error=error))
    assert outcome.value is None
    assert outcome.error is error
    assert not outcome.ok


def test_one_failure_does_not_hide_the_other():
    tgk = StubSource("TGK", error=TransportError("http://tgk1.org", OSError("refused")))
    nsu = StubSource("NSU", value=-7.8)

    outcomes = current_report([tgk, nsu])

    assert [o.source for o in outcomes] == ["TGK", "NSU"]
    assert isinstance(outcomes[0].error, TransportError)
    assert outcomes[1].value == -7.8


def test_lookups_run_concurrently():
    # both sources must be inside current_temperature at the same time
    barrier = threading.Barrier(2)
    tgk = StubSource("TGK", value=1.0, barrier=barrier)
    nsu = StubSource("NSU", value=2.0, barrier=barrier)

    outcomes = current_report([tgk, nsu])

    assert [o.value for o in outcomes] == [1.0, 2.0]
    assert tgk.thread_name != nsu.thread_name


def test_unexpected_exception_is_reraised():
    with pytest.raises(KeyError):
        current_report([StubSource("TGK", error=KeyError("bug"))])


def test_outcome_requires_exactly_one_field():
    with pytest.raises(ValueError):
        SourceOutcome(source="NSU")


def test_minmax_report_passes_lower_bound():
    reading = TempReading(datetime(2018, 11, 27, 8, 42), -14.3)
    captured = {}

    class _Source:
        def current_minmax(self, not_before=None):
            captured["not_before"] = not_before
            return MinMax(min=reading, max=reading)

    bound = datetime(2018, 11, 27)
    assert minmax_report(_Source(), bound).min == reading
    assert captured["not_before"] == bound
