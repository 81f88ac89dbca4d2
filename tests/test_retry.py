"""Tests for the upstream retry helper."""

import asyncio

import pytest

from fridge_chef.domain.errors import (
    UpstreamFormatError,
    UpstreamRejected,
    UpstreamUnavailable,
)
from fridge_chef.services.retry import call_with_retry


def test_call_with_retry_does_not_retry_format_errors() -> None:
    calls: list[int] = []

    async def broken() -> object:
        calls.append(1)
        raise UpstreamFormatError("bad shape", service="detection")

    with pytest.raises(UpstreamFormatError):
        asyncio.run(
            call_with_retry(broken, action="detection", attempts=3, delay_seconds=0)
        )
    assert len(calls) == 1


def test_call_with_retry_does_not_retry_rejected_requests() -> None:
    calls: list[int] = []

    async def unauthorized() -> object:
        calls.append(1)
        raise UpstreamRejected("bad key", service="detection", status_code=401)

    with pytest.raises(UpstreamRejected):
        asyncio.run(
            call_with_retry(
                unauthorized, action="detection", attempts=3, delay_seconds=0
            )
        )
    assert len(calls) == 1


def test_call_with_retry_returns_after_transient_failure() -> None:
    calls: list[int] = []

    async def flaky() -> str:
        calls.append(1)
        if len(calls) < 3:
            raise UpstreamUnavailable("busy", service="detection", status_code=503)
        return "ok"

    result = asyncio.run(
        call_with_retry(flaky, action="detection", attempts=2, delay_seconds=0)
    )

    assert result == "ok"
    assert len(calls) == 3


def test_call_with_retry_gives_up_after_budget() -> None:
    calls: list[int] = []

    async def down() -> object:
        calls.append(1)
        raise UpstreamUnavailable("busy", service="captioning", status_code=503)

    with pytest.raises(UpstreamUnavailable):
        asyncio.run(
            call_with_retry(down, action="captioning", attempts=1, delay_seconds=0)
        )
    assert len(calls) == 2
