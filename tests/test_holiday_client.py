from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from datetime import date

import httpx
import pytest

from bookday.domain import Holiday
from bookday.holidays import HolidayLookupError, NagerHolidayClient

BASE_URL = "https://holidays.test/api/v3"

CHRISTMAS = {
    "date": "2025-12-25",
    "localName": "Christmas Day",
    "name": "Christmas Day",
    "countryCode": "GB",
    "fixed": False,
    "global": True,
    "counties": None,
    "launchYear": None,
    "types": ["Public"],
}
BOXING_DAY = {
    "date": "2025-12-26",
    "localName": "Boxing Day",
    "name": "St. Stephen's Day",
    "countryCode": "GB",
    "fixed": False,
    "global": False,
    "counties": ["GB-ENG", "GB-WLS"],
    "launchYear": None,
    "types": ["Public"],
    "extraField": "ignored",
}

Handler = Callable[[httpx.Request], httpx.Response]


def _fetch(handler: Handler, year: int = 2025, country: str = "GB") -> list[Holiday]:
    async def _run() -> list[Holiday]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            lookup = NagerHolidayClient(base_url=BASE_URL, client=client)
            return await lookup.fetch_holidays(year, country)

    return asyncio.run(_run())


def test_fetch_holidays_decodes_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[CHRISTMAS, BOXING_DAY])

    holidays = _fetch(handler)

    assert [request.url.path for request in seen] == ["/api/v3/PublicHolidays/2025/GB"]
    assert [holiday.date for holiday in holidays] == [date(2025, 12, 25), date(2025, 12, 26)]
    assert holidays[0].local_name == "Christmas Day"
    assert holidays[1].global_ is False
    assert holidays[1].counties == ("GB-ENG", "GB-WLS")


def test_fetch_holidays_accepts_empty_list() -> None:
    assert _fetch(lambda request: httpx.Response(200, json=[])) == []


def test_trailing_slash_in_base_url_is_ignored() -> None:
    client = NagerHolidayClient(base_url=BASE_URL + "/")
    assert client.base_url == BASE_URL


@pytest.mark.parametrize("status_code", [204, 404, 500, 503])
def test_non_ok_status_raises_lookup_error(status_code: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code)

    with pytest.raises(HolidayLookupError, match=str(status_code)):
        _fetch(handler)


def test_timeout_raises_lookup_error_with_cause() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(HolidayLookupError) as excinfo:
        _fetch(handler)

    assert isinstance(excinfo.value.__cause__, httpx.TimeoutException)


def test_transport_error_raises_lookup_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(HolidayLookupError) as excinfo:
        _fetch(handler)

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        json.dumps({"date": "2025-12-25"}).encode(),
        json.dumps([{"name": "No date"}]).encode(),
        json.dumps([{"date": "25/12/2025", "name": "Bad date"}]).encode(),
    ],
)
def test_malformed_payload_raises_lookup_error(body: bytes) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body, headers={"content-type": "application/json"})

    with pytest.raises(HolidayLookupError, match="malformed"):
        _fetch(handler)


def test_non_positive_year_is_rejected_without_request() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=[])

    with pytest.raises(HolidayLookupError):
        _fetch(handler, year=0)
    assert calls == []


def test_every_call_is_a_live_fetch() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=[CHRISTMAS])

    async def _run() -> tuple[bool, bool]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            lookup = NagerHolidayClient(base_url=BASE_URL, client=client)
            christmas = await lookup.is_public_holiday(date(2025, 12, 25), "GB")
            new_year = await lookup.is_public_holiday(date(2025, 1, 1), "GB")
            return christmas, new_year

    assert asyncio.run(_run()) == (True, False)
    assert len(calls) == 2
