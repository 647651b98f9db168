import pytest

from src.imaging.result import RenderingFailed, Result


def test_success():
    result = Result.success(3)
    assert result.ok
    assert result
    assert result.unwrap() == 3


def test_failure_unwrap_raises():
    result = Result.failure("no bitmap")
    assert not result
    with pytest.raises(RenderingFailed, match="no bitmap"):
        result.unwrap()


def test_then_chains_and_short_circuits():
    assert Result.success(2).then(lambda v: Result.success(v * 5)).unwrap() == 10

    called = []
    failed = Result.failure("first").then(lambda v: called.append(v))
    assert failed.reason == "first"
    assert called == []


@pytest.mark.parametrize("reason", [None, ""])
def test_failure_requires_reason(reason):
    with pytest.raises(ValueError):
        Result.failure(reason)
