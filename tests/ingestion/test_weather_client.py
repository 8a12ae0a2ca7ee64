import pytest
import requests

from river_flooding.ingestion.weather_client import CatchmentWeatherClient, build_fallback_reading


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        endpoint = url.rsplit("/", 1)[-1]
        result = self.responses[endpoint]
        if isinstance(result, Exception):
            raise result
        return result


CURRENT = {
    "rain": {"1h": 2.5},
    "weather": [{"description": "moderate rain"}],
    "main": {"temp": 24.1},
}
FORECAST = {
    "list": [
        {"dt_txt": "2026-07-14 12:00:00", "rain": {"3h": 6.0}},
        {"dt_txt": "2026-07-14 15:00:00"},
    ]
}


def test_fallback_reading_tapers():
    reading = build_fallback_reading("request-failed", rain_mm_hr=4.2)
    assert reading.is_fallback is True
    assert reading.reason == "request-failed"
    assert reading.predicted_inflow == pytest.approx(4.2 * 1200 * 0.6)
    assert [round(p.rain_mm_hr, 2) for p in reading.hourly_forecast] == [4.2, 3.9, 3.6, 3.3, 3.0, 2.7]


def test_missing_key_returns_fallback_without_request():
    session = FakeSession({})
    client = CatchmentWeatherClient(api_key="", session=session)
    reading = client.fetch()
    assert reading.is_fallback is True
    assert reading.reason == "missing-api-key"
    assert session.calls == []


def test_successful_fetch_parses_current_and_forecast():
    session = FakeSession({"weather": FakeResponse(CURRENT), "forecast": FakeResponse(FORECAST)})
    client = CatchmentWeatherClient(api_key="k", base_url="https://example.test/data/2.5/",
                                    lat=19.9, lon=73.5, timeout=3, session=session)
    reading = client.fetch()
    assert reading.is_fallback is False
    assert reading.current_rainfall == 2.5
    assert reading.predicted_inflow == pytest.approx(2.5 * 720)
    assert reading.description == "moderate rain"
    assert reading.temp == 24.1
    assert [p.rain_mm_hr for p in reading.hourly_forecast] == [2.0, 0.0]
    url, params, timeout = session.calls[0]
    assert url == "https://example.test/data/2.5/weather"
    assert params["appid"] == "k" and params["units"] == "metric"
    assert timeout == 3


def test_network_error_degrades_to_fallback():
    session = FakeSession({
        "weather": requests.exceptions.ConnectionError("offline"),
        "forecast": FakeResponse(FORECAST),
    })
    reading = CatchmentWeatherClient(api_key="k", session=session).fetch()
    assert reading.is_fallback is True
    assert reading.reason == "request-failed"


def test_http_error_degrades_to_fallback():
    session = FakeSession({"weather": FakeResponse({}, status=401), "forecast": FakeResponse(FORECAST)})
    reading = CatchmentWeatherClient(api_key="bad", session=session).fetch()
    assert reading.reason == "request-failed"
