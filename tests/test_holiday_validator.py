from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta, timezone

import httpx
import pytest

from bookday.domain import Holiday, OutcomeKind
from bookday.holidays import DateValidator, HolidayLookupError, HolidayYearCache, NagerHolidayClient

# Monday 2 June 2025, mid-afternoon UTC.
NOW = datetime(2025, 6, 2, 15, 30, tzinfo=UTC)
TODAY = NOW.date()


def _clock() -> datetime:
    return NOW


class FakeHolidaySource:
    def __init__(
        self,
        holidays: Iterable[date] = (),
        *,
        error: Exception | None = None,
    ) -> None:
        self.holidays = tuple(holidays)
        self.error = error
        self.calls: list[tuple[int, str]] = []

    async def fetch_holidays(self, year: int, country_code: str) -> list[Holiday]:
        self.calls.append((year, country_code))
        if self.error is not None:
            raise self.error
        return [
            Holiday(date=day, name="Holiday", country_code=country_code)
            for day in self.holidays
            if day.year == year
        ]


class BlockingHolidaySource(FakeHolidaySource):
    def __init__(self, holidays: Iterable[date] = ()) -> None:
        super().__init__(holidays)
        self.release = asyncio.Event()
        self.started = asyncio.Event()

    async def fetch_holidays(self, year: int, country_code: str) -> list[Holiday]:
        self.started.set()
        await self.release.wait()
        return await super().fetch_holidays(year, country_code)


def _validator(source: FakeHolidaySource, cache: HolidayYearCache | None = None) -> DateValidator:
    return DateValidator(source, cache, clock=_clock)


def test_is_holiday_fetches_each_year_once() -> None:
    source = FakeHolidaySource([date(2025, 12, 25), date(2025, 12, 26)])
    validator = _validator(source)

    async def _run() -> list[bool]:
        return [
            await validator.is_holiday(date(2025, 12, 25)),
            await validator.is_holiday(date(2025, 12, 25)),
            await validator.is_holiday(date(2025, 12, 26)),
        ]

    assert asyncio.run(_run()) == [True, True, True]
    assert source.calls == [(2025, "GB")]


def test_cached_year_answers_any_date_without_fetch() -> None:
    source = FakeHolidaySource([date(2025, 12, 25)])
    validator = _validator(source)

    async def _run() -> list[bool]:
        await validator.is_holiday(date(2025, 12, 25))
        return [
            await validator.is_holiday(date(2025, 1, 2)),
            await validator.is_holiday(date(2025, 7, 15)),
            await validator.is_holiday(date(2025, 12, 31)),
        ]

    assert asyncio.run(_run()) == [False, False, False]
    assert len(source.calls) == 1


def test_year_without_holidays_is_cached() -> None:
    source = FakeHolidaySource()
    validator = _validator(source)

    async def _run() -> tuple[bool, bool, tuple[int, ...]]:
        first = await validator.is_holiday(date(2031, 3, 3))
        second = await validator.is_holiday(date(2031, 8, 8))
        return first, second, await validator.cached_years()

    first, second, years = asyncio.run(_run())
    assert (first, second) == (False, False)
    assert years == (2031,)
    assert source.calls == [(2031, "GB")]


def test_failed_fetch_leaves_year_absent_and_retries() -> None:
    source = FakeHolidaySource(
        [date(2025, 12, 25)],
        error=HolidayLookupError("boom"),
    )
    validator = _validator(source)

    async def _run() -> bool:
        with pytest.raises(HolidayLookupError):
            await validator.is_holiday(date(2025, 12, 25))
        assert await validator.cached_years() == ()
        source.error = None
        return await validator.is_holiday(date(2025, 12, 25))

    assert asyncio.run(_run()) is True
    assert source.calls == [(2025, "GB"), (2025, "GB")]


def test_validator_uses_configured_country_code() -> None:
    source = FakeHolidaySource()
    validator = DateValidator(source, country_code="DE", clock=_clock)

    asyncio.run(validator.is_holiday(date(2025, 10, 3)))

    assert source.calls == [(2025, "DE")]


def test_today_is_not_rejected_as_past() -> None:
    source = FakeHolidaySource()
    outcome = asyncio.run(_validator(source).validate(TODAY))

    assert outcome.kind is OutcomeKind.VALID
    assert source.calls == [(2025, "GB")]


def test_yesterday_is_past_without_network() -> None:
    source = FakeHolidaySource()
    outcome = asyncio.run(_validator(source).validate(date(2025, 5, 30)))

    assert outcome.kind is OutcomeKind.PAST_DATE
    assert source.calls == []


def test_past_weekend_reports_past_date_first() -> None:
    # Sunday 1 June 2025 is both yesterday and a weekend day.
    source = FakeHolidaySource()
    outcome = asyncio.run(_validator(source).validate(date(2025, 6, 1)))

    assert outcome.kind is OutcomeKind.PAST_DATE
    assert source.calls == []


def test_next_saturday_is_weekend_without_network() -> None:
    source = FakeHolidaySource()
    validator = _validator(source)

    saturday = asyncio.run(validator.validate(date(2025, 6, 7)))
    sunday = asyncio.run(validator.validate(date(2025, 6, 8)))

    assert saturday.kind is OutcomeKind.WEEKEND
    assert sunday.kind is OutcomeKind.WEEKEND
    assert source.calls == []


def test_weekday_next_week_is_valid_with_no_holidays() -> None:
    source = FakeHolidaySource()
    outcome = asyncio.run(_validator(source).validate(TODAY + timedelta(days=7)))

    assert outcome.is_valid
    assert outcome.cause is None


def test_listed_holiday_is_rejected() -> None:
    source = FakeHolidaySource([date(2025, 12, 25)])
    outcome = asyncio.run(_validator(source).validate(date(2025, 12, 25)))

    assert outcome.kind is OutcomeKind.HOLIDAY


def test_aware_datetime_is_judged_on_its_utc_day() -> None:
    # 01:00 on Monday in UTC+5 is still Sunday in UTC.
    source = FakeHolidaySource()
    candidate = datetime(2025, 6, 9, 1, 0, tzinfo=timezone(timedelta(hours=5)))

    outcome = asyncio.run(_validator(source).validate(candidate))

    assert outcome.kind is OutcomeKind.WEEKEND


def test_remote_timeout_reports_lookup_failed_and_keeps_cache_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    cache = HolidayYearCache()

    async def _run() -> tuple[OutcomeKind, Exception | None, bool]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            source = NagerHolidayClient(base_url="https://holidays.test/api/v3", client=client)
            validator = DateValidator(source, cache, clock=_clock)
            outcome = await validator.validate(date(2025, 6, 10))
        return outcome.kind, outcome.cause, await cache.contains(2025)

    kind, cause, cached = asyncio.run(_run())
    assert kind is OutcomeKind.LOOKUP_FAILED
    assert isinstance(cause, HolidayLookupError)
    assert isinstance(cause.__cause__, httpx.TimeoutException)
    assert cached is False


def test_concurrent_misses_may_both_fetch_and_agree() -> None:
    async def _run() -> tuple[list[bool], int, tuple[int, ...]]:
        source = BlockingHolidaySource([date(2025, 12, 25)])
        validator = _validator(source)
        first = asyncio.create_task(validator.is_holiday(date(2025, 12, 25)))
        second = asyncio.create_task(validator.is_holiday(date(2025, 12, 24)))
        await source.started.wait()
        await asyncio.sleep(0)
        source.release.set()
        results = await asyncio.gather(first, second)
        return list(results), len(source.calls), await validator.cached_years()

    results, fetches, years = asyncio.run(_run())
    assert results == [True, False]
    assert fetches in {1, 2}
    assert years == (2025,)


def test_cache_stays_readable_while_a_fetch_is_in_flight() -> None:
    async def _run() -> bool:
        cache = HolidayYearCache()
        await cache.store(2026, [date(2026, 1, 1)])
        source = BlockingHolidaySource()
        validator = _validator(source, cache)

        pending = asyncio.create_task(validator.is_holiday(date(2025, 12, 25)))
        await source.started.wait()
        cached_answer = await asyncio.wait_for(validator.is_holiday(date(2026, 1, 1)), 1.0)
        assert not pending.done()

        source.release.set()
        await pending
        return cached_answer

    assert asyncio.run(_run()) is True


def test_injected_cache_is_shared_between_validators() -> None:
    cache = HolidayYearCache()
    first_source = FakeHolidaySource([date(2025, 12, 25)])
    second_source = FakeHolidaySource()

    asyncio.run(_validator(first_source, cache).is_holiday(date(2025, 12, 25)))
    result = asyncio.run(_validator(second_source, cache).is_holiday(date(2025, 12, 25)))

    assert result is True
    assert second_source.calls == []


def test_lookup_failure_is_logged_as_error_once(caplog: pytest.LogCaptureFixture) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, request=request)

    caplog.set_level(logging.DEBUG, logger="bookday")

    async def _run() -> OutcomeKind:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            source = NagerHolidayClient(base_url="https://holidays.test/api/v3", client=client)
            validator = DateValidator(source, clock=_clock)
            outcome = await validator.validate(date(2025, 6, 10))
        return outcome.kind

    assert asyncio.run(_run()) is OutcomeKind.LOOKUP_FAILED
    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert [record.name for record in errors] == ["bookday.holidays.client"]
