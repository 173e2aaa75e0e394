from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from services.decoder import build_default_decoder
from settings import get_settings

SAMPLE_LINE = (
    "2024-06-11 14:09:57.00 F M 79.6   92.8  93      0      42  66.3   000 1 1 00019 "
    "045454.59025 3 1 1 1 1 1\n"
)


@pytest.fixture
def api_client(monkeypatch) -> Iterator[TestClient]:
    monkeypatch.setenv("SKYALERT_TIMEZONE", "America/Chicago")
    get_settings.cache_clear()
    build_default_decoder.cache_clear()

    app = create_app()
    with TestClient(app) as client:
        yield client

    build_default_decoder.cache_clear()
    get_settings.cache_clear()


def _upload(client: TestClient, contents, params=None):
    return client.post(
        "/records",
        params=params,
        files={"file": ("skyalert.txt", contents, "text/plain")},
    )


def test_lifespan_builds_and_clears_decoder(monkeypatch) -> None:
    monkeypatch.setenv("SKYALERT_TIMEZONE", "UTC")
    get_settings.cache_clear()
    build_default_decoder.cache_clear()

    try:
        app = create_app()
        with TestClient(app):
            assert build_default_decoder.cache_info().currsize == 1
            assert str(build_default_decoder().location) == "UTC"

        assert build_default_decoder.cache_info().currsize == 0
    finally:
        build_default_decoder.cache_clear()
        get_settings.cache_clear()


def test_decode_upload(api_client: TestClient) -> None:
    response = _upload(api_client, SAMPLE_LINE)

    assert response.status_code == 200
    payload = response.json()
    assert payload["timestamp"] == "2024-06-11T14:09:57-05:00"
    assert payload["temperature_scale"] == "F"
    assert payload["wind_scale"] == "M"
    assert payload["sky_temp"] == 79.6
    assert payload["humidity"] == 42
    assert payload["days_since_last_write"] == 45454.59025
    assert payload["cloud_condition"] == 3
    assert payload["alert_condition"] == 1
    assert payload["roof_close_requested"] == 1
    assert "generated_at" not in payload


def test_decode_upload_with_timezone_override(api_client: TestClient) -> None:
    response = _upload(api_client, SAMPLE_LINE, params={"tz": "UTC"})

    assert response.status_code == 200
    assert response.json()["timestamp"] == "2024-06-11T14:09:57Z"


def test_only_first_line_is_decoded(api_client: TestClient) -> None:
    response = _upload(api_client, SAMPLE_LINE + "garbage\n")

    assert response.status_code == 200
    assert response.json()["seconds_since_good_data"] == 19


def test_unknown_timezone_returns_bad_request(api_client: TestClient) -> None:
    response = _upload(api_client, SAMPLE_LINE, params={"tz": "Mars/Olympus_Mons"})

    assert response.status_code == 400
    assert "Unknown timezone" in response.json()["detail"]


def test_empty_upload_returns_bad_request(api_client: TestClient) -> None:
    response = _upload(api_client, b"")

    assert response.status_code == 400
    assert response.json()["detail"] == "Uploaded file is empty."


def test_bad_timestamp_returns_unprocessable(api_client: TestClient) -> None:
    response = _upload(api_client, SAMPLE_LINE.replace("2024-06-11", "2024-06-54"))

    assert response.status_code == 422
    assert response.json()["detail"].startswith('parsing time "2024-06-54 14:09:57.00"')


def test_short_line_returns_unprocessable(api_client: TestClient) -> None:
    response = _upload(api_client, "2024-06-11 14:09:57.00 F M\n")

    assert response.status_code == 422
    assert "at least 104" in response.json()["detail"]


def test_healthcheck(api_client: TestClient) -> None:
    assert api_client.get("/health").json() == {"status": "ok"}
    assert api_client.get("/").json()["status"] == "ok"
