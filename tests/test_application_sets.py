"""
Tests for the sets application layer (request handler).

Tests the handler with a mocked store. No real infrastructure needed.
Each test verifies delegation and result wrapping, not set semantics.
"""

from unittest.mock import Mock

import pytest

from setservice.application.sets.handler import SetRequestHandler
from setservice.application.sets.results import Failure, Success
from setservice.domain.sets.errors import InvalidRequestError, SetDomainError
from setservice.domain.sets.ports import SetStore


@pytest.fixture
def store() -> Mock:
    return Mock(spec=SetStore)


@pytest.fixture
def handler(store: Mock) -> SetRequestHandler:
    return SetRequestHandler(store=store)


class TestAddSingle:
    """Tests for SetRequestHandler.add_single."""

    def test_returns_store_answer(self, handler: SetRequestHandler, store: Mock) -> None:
        store.add_one.return_value = True
        result = handler.add_single("MyTest1")
        assert result == Success(True)
        assert result.ok
        store.add_one.assert_called_once_with("MyTest1")

    def test_false_is_still_success(self, handler: SetRequestHandler, store: Mock) -> None:
        store.add_one.return_value = False
        assert handler.add_single("MyTest1") == Success(False)

    def test_validation_failure_becomes_failure(
        self, handler: SetRequestHandler, store: Mock
    ) -> None:
        error = InvalidRequestError("Mocked failure.")
        store.add_one.side_effect = error
        result = handler.add_single("MyTest1")
        assert isinstance(result, Failure)
        assert not result.ok
        assert result.error is error

    def test_other_domain_errors_propagate(
        self, handler: SetRequestHandler, store: Mock
    ) -> None:
        store.add_one.side_effect = SetDomainError("broken")
        with pytest.raises(SetDomainError):
            handler.add_single("MyTest1")


class TestAddMultiple:
    """Tests for SetRequestHandler.add_multiple."""

    def test_delegates_to_add_many(self, handler: SetRequestHandler, store: Mock) -> None:
        result = handler.add_multiple({"a", "b"})
        assert result == Success(None)
        store.add_many.assert_called_once_with({"a", "b"})

    def test_validation_failure_becomes_failure(
        self, handler: SetRequestHandler, store: Mock
    ) -> None:
        store.add_many.side_effect = InvalidRequestError("Mocked failure.")
        assert isinstance(handler.add_multiple({"a"}), Failure)


class TestGetAll:
    """Tests for SetRequestHandler.get_all."""

    def test_returns_snapshot(self, handler: SetRequestHandler, store: Mock) -> None:
        store.snapshot.return_value = frozenset({"a", "b"})
        assert handler.get_all() == Success(frozenset({"a", "b"}))

    def test_validation_failure_becomes_failure(
        self, handler: SetRequestHandler, store: Mock
    ) -> None:
        store.snapshot.side_effect = InvalidRequestError("Mocked failure.")
        assert isinstance(handler.get_all(), Failure)
