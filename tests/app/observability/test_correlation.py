"""Testes do correlation_id via ContextVar."""

from __future__ import annotations

import asyncio
import uuid

import pytest

from app.observability import (
    correlation_id_from_headers,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_restores_previous_value() -> None:
    outer = set_correlation_id("outer")
    inner = set_correlation_id("inner")

    assert get_correlation_id() == "inner"
    reset_correlation_id(inner)
    assert get_correlation_id() == "outer"
    reset_correlation_id(outer)


def test_set_without_value_generates_uuid() -> None:
    token = set_correlation_id(None)
    try:
        uuid.UUID(get_correlation_id())
    finally:
        reset_correlation_id(token)


def test_long_values_are_truncated() -> None:
    token = set_correlation_id("x" * 500)
    try:
        assert len(get_correlation_id()) == 128
    finally:
        reset_correlation_id(token)


def test_generate_is_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


@pytest.mark.parametrize(
    ("headers", "expected"),
    [
        ({"x-correlation-id": "corr-1", "x-request-id": "req-1"}, "corr-1"),
        ({"x-request-id": " req-2 "}, "req-2"),
        ({"x-correlation-id": "   "}, None),
        ({}, None),
    ],
)
def test_correlation_id_from_headers(headers: dict[str, str], expected: str | None) -> None:
    assert correlation_id_from_headers(headers) == expected


@pytest.mark.asyncio
async def test_background_task_inherits_context() -> None:
    token = set_correlation_id("parent")
    try:
        seen = await asyncio.create_task(_read_correlation_id())
    finally:
        reset_correlation_id(token)

    assert seen == "parent"


async def _read_correlation_id() -> str:
    return get_correlation_id()
