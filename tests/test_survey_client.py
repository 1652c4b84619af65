"""Tests for the form view-model and the submit client."""
import asyncio

import httpx
import pytest

from cryptopoll.main import app
from cryptopoll.services.survey_client import (
    FieldError,
    SubmissionOutcome,
    SurveyClient,
    SurveyForm,
)


def make_form(**overrides):
    values = {
        "name": " Ana María ",
        "email": "ana@example.com ",
        "age": "31",
        "role": "solana",
        "frequency": "daily",
        "prefer": ["security", "community"],
        "comment": "  <3 crypto ",
    }
    values.update(overrides)
    return SurveyForm(**values)


def test_valid_form_has_no_errors():
    assert make_form().validate() == []
    assert make_form().first_error() is None


def test_form_reports_every_required_error_in_order():
    form = make_form(name="", email="nope", age="5", role="")

    assert [e.field for e in form.validate()] == ["name", "email", "age", "cryptocurrency"]
    assert form.first_error() == FieldError(field="name", message="Name is required.")


def test_optional_fields_do_not_produce_errors():
    form = make_form(frequency="hourly", prefer=["unknown"], comment="")

    assert form.validate() == []


def test_payload_uses_submit_contract():
    payload = make_form(frequency="", comment="   ", age="").to_payload()

    assert payload == {
        "name": "Ana María",
        "email": "ana@example.com",
        "age": None,
        "role": "solana",
        "frequency": None,
        "prefer": ["security", "community"],
        "comment": None,
    }


def test_submit_round_trip_against_app(override_db, row_counts):
    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            return await SurveyClient(http_client=http).submit(make_form())

    outcome = asyncio.run(run())

    assert outcome.success is True
    assert outcome.status_code == 200
    assert row_counts()["users"] == 1
    assert row_counts()["comments"] == 1


def test_client_side_error_skips_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"success": True, "message": "ok"})

    async def run():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://survey"
        ) as http:
            return await SurveyClient(http_client=http).submit(make_form(email="bad"))

    outcome = asyncio.run(run())

    assert outcome.success is False
    assert "email" in outcome.message.lower()
    assert calls == []


def test_server_error_message_is_shown():
    def handler(request):
        return httpx.Response(400, json={"error": "Invalid value for cryptocurrency."})

    async def run():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://survey"
        ) as http:
            return await SurveyClient(http_client=http).submit(make_form())

    outcome = asyncio.run(run())

    assert outcome == SubmissionOutcome(
        success=False, message="Invalid value for cryptocurrency.", status_code=400
    )


def test_connection_error_becomes_outcome():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def run():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://survey"
        ) as http:
            return await SurveyClient(http_client=http).submit(make_form())

    outcome = asyncio.run(run())

    assert outcome.success is False
    assert "Connection error" in outcome.message
    assert outcome.status_code is None


@pytest.mark.parametrize(
    "response, success, message",
    [
        (httpx.Response(200, json={"success": True, "message": "Saved."}), True, "Saved."),
        (httpx.Response(200, json={"success": True}), True, "Survey sent."),
        (httpx.Response(500, json={"error": "Error saving to the database.", "details": "x"}), False, "Error saving to the database."),
        (httpx.Response(502, text="<html>Bad gateway</html>"), False, "Error: 502 Bad Gateway"),
        (httpx.Response(200, json=["unexpected"]), False, "Error: 200 OK"),
    ],
)
def test_interpret_response(response, success, message):
    outcome = SurveyClient.interpret_response(response)

    assert outcome.success is success
    assert outcome.message == message
