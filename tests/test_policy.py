import asyncio
import logging

import pytest

from storefront.integrations.policy.availability import AvailabilityProber
from storefront.integrations.policy.fallback import FallbackRouter
from storefront.integrations.policy.notifications import NotificationDispatcher


class HealthyClient:
    async def health_check(self):
        return {"status": "ok"}


class HangingClient:
    async def health_check(self):
        await asyncio.Event().wait()


class FailingClient:
    async def health_check(self):
        raise ConnectionError("refused")


class BrokenClient:
    def health_check(self):
        raise RuntimeError("bad base url")


class CountingProber:
    def __init__(self, available=True):
        self.available = available
        self.calls = 0

    async def is_available(self):
        self.calls += 1
        return self.available


# --------------------------------------------------------------------------- #
# AvailabilityProber
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_probe_true_for_healthy_backend():
    assert await AvailabilityProber(HealthyClient()).is_available() is True


@pytest.mark.asyncio
async def test_probe_times_out_to_false():
    prober = AvailabilityProber(HangingClient(), timeout_seconds=0.05)
    assert await asyncio.wait_for(prober.is_available(), timeout=2) is False


@pytest.mark.asyncio
async def test_probe_failures_collapse_to_false_and_log_outside_production(caplog):
    caplog.set_level(logging.WARNING)

    assert await AvailabilityProber(FailingClient()).is_available() is False
    assert await AvailabilityProber(BrokenClient()).is_available() is False
    assert "availability probe failed" in caplog.text


@pytest.mark.asyncio
async def test_probe_is_silent_in_production(caplog):
    caplog.set_level(logging.WARNING)

    assert await AvailabilityProber(FailingClient(), production=True).is_available() is False
    assert caplog.text == ""


# --------------------------------------------------------------------------- #
# FallbackRouter
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_disabled_backend_never_probes_or_calls_remote():
    prober = CountingProber()
    router = FallbackRouter(prober, backend_enabled=False)

    async def remote():
        raise AssertionError("remote must not be called")

    assert await router.run("op", remote=remote, local=lambda: "local") == "local"
    assert prober.calls == 0


@pytest.mark.asyncio
async def test_unavailable_backend_uses_local():
    router = FallbackRouter(CountingProber(available=False))

    async def remote():
        raise AssertionError("remote must not be called")

    assert await router.run("op", remote=remote, local=lambda: "local") == "local"


@pytest.mark.asyncio
async def test_remote_failure_falls_back_and_skips_after_remote():
    router = FallbackRouter(CountingProber())
    after = []

    async def remote():
        raise ValueError("boom")

    async def after_remote(result):
        after.append(result)

    result = await router.run("op", remote=remote, local=lambda: "local", after_remote=after_remote)

    assert result == "local"
    assert after == []


@pytest.mark.asyncio
async def test_remote_success_runs_after_remote_then_returns():
    router = FallbackRouter(CountingProber())
    after = []

    async def remote():
        return {"id": "r1"}

    async def after_remote(result):
        after.append(result["id"])

    result = await router.run("op", remote=remote, local=lambda: "local", after_remote=after_remote)

    assert result == {"id": "r1"}
    assert after == ["r1"]


class ChargeError(Exception):
    pass


@pytest.mark.asyncio
async def test_remote_only_raises_instead_of_falling_back():
    async def remote():
        raise ConnectionError("down")

    with pytest.raises(ChargeError):
        await FallbackRouter(CountingProber(), backend_enabled=False).run_remote_only("charge", remote, ChargeError)
    with pytest.raises(ChargeError):
        await FallbackRouter(CountingProber(available=False)).run_remote_only("charge", remote, ChargeError)
    with pytest.raises(ChargeError) as exc_info:
        await FallbackRouter(CountingProber()).run_remote_only("charge", remote, ChargeError)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


# --------------------------------------------------------------------------- #
# NotificationDispatcher
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_dispatcher_records_failures_without_raising():
    dispatcher = NotificationDispatcher(max_outcomes=2)

    async def ok():
        return None

    async def fail():
        raise RuntimeError("smtp down")

    first = await dispatcher.dispatch("welcome", ok)
    second = await dispatcher.dispatch("confirmation", fail)
    await dispatcher.dispatch("ack", ok)

    assert first.delivered is True
    assert second.delivered is False and second.error == "smtp down"
    assert [o.name for o in dispatcher.outcomes] == ["confirmation", "ack"]
    assert [o.name for o in dispatcher.failures] == ["confirmation"]


@pytest.mark.asyncio
async def test_dispatcher_bounds_a_hanging_send():
    dispatcher = NotificationDispatcher(timeout_seconds=0.05)

    async def hang():
        await asyncio.sleep(5)

    outcome = await dispatcher.dispatch("confirmation", hang)

    assert outcome.delivered is False
    assert outcome.error == "timed out"
