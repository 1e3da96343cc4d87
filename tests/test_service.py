"""Tests for the Service contract."""

import pytest

from chainlog import LogDisplayService, Service


class Upper(Service[str, str]):
    def process(self, input: str) -> str:
        return input.upper()


class Explode(Service[str, str]):
    def process(self, input: str) -> str:
        raise ValueError(f"cannot process {input!r}")


def test_service_is_abstract():
    with pytest.raises(TypeError):
        Service()


def test_subclass_must_implement_process():
    class Incomplete(Service):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_call_delegates_to_process():
    service = Upper()

    assert service("abc") == "ABC"
    assert list(map(service, ["a", "b"])) == ["A", "B"]


def test_errors_propagate_from_process():
    with pytest.raises(ValueError, match="cannot process 'x'"):
        Explode()("x")


def test_log_service_composes_with_other_services(chain_records):
    upper = Upper()
    tap = LogDisplayService.info("upper: ")

    assert tap(upper("hello")) == "HELLO"
    assert [r.getMessage() for r in chain_records()] == ["upper: HELLO"]
