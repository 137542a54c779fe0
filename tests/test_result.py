"""Tests for the Result value, its constructors and shape checks."""

from __future__ import annotations

import dataclasses
from collections import OrderedDict

import pytest

from tryresult import Failure, Success, fail, is_failure, is_result, is_success, succeed


class TestSucceed:
    def test_carries_value(self) -> None:
        payload = {"id": 7}
        r = succeed(payload)
        assert r.success is True
        assert r.data is payload

    def test_no_argument_is_none(self) -> None:
        r = succeed()
        assert r.success is True
        assert r.data is None

    def test_explicit_none_matches_no_argument(self) -> None:
        assert succeed(None) == succeed()

    def test_success_is_not_an_init_argument(self) -> None:
        with pytest.raises(TypeError):
            Success(success=False, data=1)  # type: ignore[call-arg]


class TestFail:
    def test_carries_error(self) -> None:
        err = ValueError("bad")
        r = fail(err)
        assert r.success is False
        assert r.error is err

    def test_accepts_none(self) -> None:
        assert fail(None).error is None

    def test_accepts_result_as_error(self) -> None:
        inner = succeed(1)
        assert fail(inner).error is inner


class TestValueContract:
    def test_success_dict(self) -> None:
        assert succeed("ok").to_dict() == {"success": True, "data": "ok"}

    def test_failure_dict(self) -> None:
        assert fail("bad").to_dict() == {"success": False, "error": "bad"}

    def test_no_extra_fields(self) -> None:
        assert [f.name for f in dataclasses.fields(Success)] == ["success", "data"]
        assert [f.name for f in dataclasses.fields(Failure)] == ["success", "error"]

    def test_structural_equality(self) -> None:
        assert succeed(3) == Success(3)
        assert fail("x") == Failure("x")
        assert succeed("x") != fail("x")

    def test_immutable(self) -> None:
        r = succeed(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.data = 2  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.success = False  # type: ignore[misc]

    def test_pattern_matching(self) -> None:
        def describe(r: object) -> str:
            match r:
                case Success(data):
                    return f"ok:{data}"
                case Failure(error):
                    return f"err:{error}"
            return "other"

        assert describe(succeed(1)) == "ok:1"
        assert describe(fail("x")) == "err:x"


class TestIsResult:
    @pytest.mark.parametrize(
        "value",
        [
            succeed(1),
            succeed(),
            fail("x"),
            {"success": True, "data": 1},
            {"success": True, "data": None},
            {"success": False, "error": None},
            {"success": False, "error": "x", "extra": 1},
            OrderedDict(success=True, data=[1, 2]),
        ],
    )
    def test_recognised(self, value: object) -> None:
        assert is_result(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            None,
            42,
            "success",
            b"success",
            [True, 1],
            (True, 1),
            {},
            {"data": 1},
            {"success": True},
            {"success": False},
            {"success": True, "error": "x"},
            {"success": False, "data": 1},
            {"success": 1, "data": 1},
            {"success": 0, "error": "x"},
            {"success": "true", "data": 1},
            {"success": None, "data": 1, "error": 2},
        ],
    )
    def test_rejected(self, value: object) -> None:
        assert is_result(value) is False

    def test_object_with_attributes_is_not_a_record(self) -> None:
        class Lookalike:
            success = True
            data = 1

        assert is_result(Lookalike()) is False


class TestNarrowing:
    def test_is_success(self) -> None:
        assert is_success(succeed(1))
        assert not is_success(fail(1))

    def test_is_failure(self) -> None:
        assert is_failure(fail(1))
        assert not is_failure(succeed(1))


class TestRepr:
    def test_success(self) -> None:
        assert repr(succeed(42)) == "Success(data=42)"

    def test_failure(self) -> None:
        assert repr(fail("bad")) == "Failure(error='bad')"
