"""
Tests for the Ok/Err result helpers.
"""

import pytest

from railcheck import (
    ABSENT,
    Err,
    Ok,
    ValidationError,
    ValidationFailed,
    combine,
    combine_all,
    is_err,
    is_ok,
)


class TestResult:
    def test_ok(self):
        result = Ok(5)
        assert result.is_ok() and not result.is_err()
        assert is_ok(result) and not is_err(result)
        assert result.unwrap() == 5

    def test_err(self):
        result = Err([ValidationError((), "bad")])
        assert result.is_err() and not result.is_ok()
        assert is_err(result) and not is_ok(result)

    def test_map(self):
        assert Ok(2).map(lambda x: x * 10) == Ok(20)
        err = Err(["e"])
        assert err.map(lambda x: x * 10) is err

    def test_and_then(self):
        half = lambda x: Ok(x // 2) if x % 2 == 0 else Err(["odd"])  # noqa: E731
        assert Ok(4).and_then(half) == Ok(2)
        assert Ok(3).and_then(half) == Err(["odd"])
        err = Err(["e"])
        assert err.and_then(half) is err

    def test_single_error_unwrap(self):
        with pytest.raises(ValidationFailed) as exc_info:
            Err(ValidationError(("a",), "bad")).unwrap()
        assert exc_info.value.errors == [ValidationError(("a",), "bad")]

    def test_immutable(self):
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]


class TestCombine:
    def test_all_ok(self):
        assert combine([Ok(1), Ok(2)]) == Ok([1, 2])

    def test_first_error(self):
        first = Err(["a"])
        assert combine([Ok(1), first, Err(["b"])]) is first

    def test_empty(self):
        assert combine([]) == Ok([])


class TestCombineAll:
    def test_all_ok(self):
        assert combine_all([Ok(1), Ok(2)]) == Ok([1, 2])

    def test_flattens_error_lists(self):
        a = ValidationError(("a",), "x")
        b = ValidationError(("b",), "y")
        c = ValidationError(("c",), "z")
        assert combine_all([Err([a, b]), Ok(1), Err([c])]) == Err([a, b, c])

    def test_scalar_errors(self):
        assert combine_all([Err("a"), Err("b")]) == Err(["a", "b"])


class TestAbsent:
    def test_singleton(self):
        assert ABSENT is ABSENT
        assert ABSENT is not None

    def test_falsy(self):
        assert not ABSENT
