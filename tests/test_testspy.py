import pytest

from observable.testspy import SpyTB, SpyUnsupportedError


class _RecordingTB:
    def __init__(self):
        self.helper_calls = 0

    def helper(self):
        self.helper_calls += 1


def test_new_spy_starts_without_failure():
    spy = SpyTB()
    assert spy.spied_on_failure is False


def test_error_sets_flag():
    spy = SpyTB()
    spy.error("msg")
    assert spy.spied_on_failure is True


def test_errorf_sets_flag():
    spy = SpyTB()
    spy.errorf("msg %d", 1)
    assert spy.spied_on_failure is True


def test_fail_sets_flag():
    spy = SpyTB()
    spy.fail()
    assert spy.spied_on_failure is True


def test_soft_fail_sequence_with_reset():
    spy = SpyTB()
    spy.error("msg")
    assert spy.spied_on_failure
    spy.spied_on_failure = False
    spy.errorf("msg %d", 1)
    assert spy.spied_on_failure
    spy.spied_on_failure = False
    spy.fail()
    assert spy.spied_on_failure


def test_fail_now_raises():
    with pytest.raises(SpyUnsupportedError):
        SpyTB().fail_now()


def test_fatal_raises():
    with pytest.raises(SpyUnsupportedError):
        SpyTB().fatal("boom")


def test_fatalf_raises():
    with pytest.raises(SpyUnsupportedError):
        SpyTB().fatalf("boom %d", 1)


def test_unsupported_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        SpyTB().fatal("boom")


def test_helper_delegates_to_wrapped_handle():
    inner = _RecordingTB()
    spy = SpyTB(inner)
    spy.helper()
    spy.helper()
    assert inner.helper_calls == 2
    assert spy.spied_on_failure is False


def test_helper_without_wrapped_handle_records_nothing():
    spy = SpyTB()
    spy.helper()
    assert spy.spied_on_failure is False