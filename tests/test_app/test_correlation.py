"""Testes do correlation_id por contexto."""

from __future__ import annotations

import asyncio
import uuid

import pytest

from app.observability import bind_correlation_id, get_correlation_id


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_bind_uses_given_value_and_restores() -> None:
    with bind_correlation_id("abc") as value:
        assert value == "abc"
        assert get_correlation_id() == "abc"
        with bind_correlation_id("inner"):
            assert get_correlation_id() == "inner"
        assert get_correlation_id() == "abc"
    assert get_correlation_id() == ""


@pytest.mark.parametrize("value", [None, ""])
def test_bind_generates_uuid_when_absent(value: str | None) -> None:
    with bind_correlation_id(value) as generated:
        assert uuid.UUID(generated).version == 4


@pytest.mark.asyncio
async def test_isolated_between_tasks() -> None:
    async def worker(name: str) -> str:
        with bind_correlation_id(name):
            await asyncio.sleep(0)
            return get_correlation_id()

    assert await asyncio.gather(worker("a"), worker("b")) == ["a", "b"]
