from __future__ import annotations

import pytest

import config.testing as testing_settings
from src.earnings_ticker.earnings_ticker.container import build_container
from src.earnings_ticker.earnings_ticker.main import create_app

SHIFT_FORM = {
    "currency": "USD",
    "salary": "47000",
    "start_time": "9:00 AM",
    "end_time": "5:00 PM",
}


@pytest.fixture
def app_container(clock, scheduler):
    container = build_container(settings=testing_settings, scheduler=scheduler, clock=clock)
    app = create_app(settings=testing_settings, container=container)
    yield app.test_client(), container
    container.controller.shutdown()


def test_status_starts_idle(app_container):
    client, _ = app_container

    body = client.get("/ticker").get_json()

    assert body["status"] == "IDLE"
    assert body["display"] is None
    assert body["workdays"]["days_actively_working"] == 235


def test_start_runs_ticker(app_container):
    client, _ = app_container

    body = client.post("/ticker/start", data=SHIFT_FORM).get_json()

    assert body["status"] == "RUNNING"
    assert body["phase"] == "ACTIVE"
    assert body["display"] == "$100.00"
    assert body["shift"]["daily_wage"] == 200.0
    assert body["shift"]["start"] == "9:00 AM"


def test_missing_field_abandons_start(app_container):
    client, container = app_container
    form = dict(SHIFT_FORM)
    form.pop("end_time")

    body = client.post("/ticker/start", data=form).get_json()

    assert body["status"] == "IDLE"
    assert container.store.load().is_complete is False


def test_invalid_salary_is_reported(app_container):
    client, _ = app_container

    body = client.post("/ticker/start", data={**SHIFT_FORM, "salary": "lots"}).get_json()

    assert body["status"] == "IDLE"
    assert body["messages"] == [
        {"level": "error", "message": "Invalid salary amount. Please enter a positive number."}
    ]


def test_cancel_stops_ticker(app_container):
    client, container = app_container
    client.post("/ticker/start", data=SHIFT_FORM)

    body = client.post("/ticker/cancel").get_json()

    assert body["status"] == "IDLE"
    assert body["display"] is None
    assert {"level": "info", "message": "Earnings ticker cancelled."} in body["messages"]
    assert container.store.load().active is False


def test_reuse_answer_resumes_stored_shift(app_container):
    client, container = app_container
    client.post("/ticker/start", data=SHIFT_FORM)
    container.controller.shutdown()

    body = client.post("/ticker/start", data={"reuse": "reuse"}).get_json()

    assert body["status"] == "RUNNING"
    assert body["display"] == "$100.00"


def test_settings_change_reconfigures_running_ticker(app_container):
    client, _ = app_container
    client.post("/ticker/start", data=SHIFT_FORM)

    body = client.post("/ticker/settings", data={"days_off": "11"}).get_json()

    assert body["workdays"]["days_actively_working"] == 250
    assert body["display"] == "$94.00"


@pytest.mark.parametrize("form", [{"days_off": "abc"}, {"days_off": "300"}, {"annual_workdays": "0"}])
def test_invalid_settings_are_rejected(app_container, form):
    client, _ = app_container

    response = client.post("/ticker/settings", data=form)

    assert response.status_code == 400
    assert "error" in response.get_json()
