"""Tests for the SharpAPI provider client (HTTP calls are mocked)."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from ai_translator.translation.exceptions import ProviderError
from ai_translator.translation.provider import JobHandle, SharpApiProvider, create_provider


def make_response(payload, status_code=200, headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.json.return_value = payload
    response.text = str(payload)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


def job_status(status, content=None):
    attributes = {"status": status}
    if content is not None:
        attributes["result"] = {"content": content}
    return {"data": {"type": "api_job_result", "id": "job-1", "attributes": attributes}}


@pytest.fixture
def sharp():
    return SharpApiProvider(api_key="test-key", poll_interval=2, max_wait=60)


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("SHARP_API_KEY", "env-key")
    assert SharpApiProvider().api_key == "env-key"
    assert SharpApiProvider().is_configured()


def test_missing_api_key_is_not_configured(monkeypatch):
    monkeypatch.delenv("SHARP_API_KEY", raising=False)
    assert not SharpApiProvider().is_configured()


@patch("ai_translator.translation.provider.requests.request")
def test_submit_posts_payload(mock_request, sharp):
    mock_request.return_value = make_response(
        {"status_url": "https://sharpapi.com/api/v1/content/translate/job/status/job-1", "job_id": "job-1"},
        status_code=202
    )

    handle = sharp.submit("Hello", "French", "neutral", "Source language is English")

    assert handle == JobHandle("job-1", "https://sharpapi.com/api/v1/content/translate/job/status/job-1")
    method, url = mock_request.call_args[0]
    kwargs = mock_request.call_args[1]
    assert method == "POST"
    assert url == "https://sharpapi.com/api/v1/content/translate"
    assert kwargs["json"] == {
        "content": "Hello",
        "language": "French",
        "voice_tone": "neutral",
        "context": "Source language is English",
    }
    assert kwargs["headers"]["Authorization"] == "Bearer test-key"


@patch("ai_translator.translation.provider.requests.request")
def test_submit_without_status_url_fails(mock_request, sharp):
    mock_request.return_value = make_response({"job_id": "job-1"})

    with pytest.raises(ProviderError):
        sharp.submit("Hello", "French", "neutral", "Source language is English")


@patch("ai_translator.translation.provider.requests.request")
def test_submit_http_error(mock_request, sharp):
    mock_request.return_value = make_response({"message": "Unauthenticated."}, status_code=401)

    with pytest.raises(ProviderError, match="status 401"):
        sharp.submit("Hello", "French", "neutral", "Source language is English")


@patch("ai_translator.translation.provider.requests.request")
def test_submit_network_error(mock_request, sharp):
    mock_request.side_effect = requests.exceptions.ConnectionError("connection refused")

    with pytest.raises(ProviderError, match="Network error"):
        sharp.submit("Hello", "French", "neutral", "Source language is English")


@patch("ai_translator.translation.provider.requests.request")
def test_submit_validation_error_payload(mock_request, sharp):
    mock_request.return_value = make_response({"errors": {"language": ["invalid"]}})

    with pytest.raises(ProviderError, match="rejected"):
        sharp.submit("Hello", "Klingon", "neutral", "Source language is English")


@patch("ai_translator.translation.provider.time.sleep")
@patch("ai_translator.translation.provider.requests.request")
def test_fetch_result_polls_until_success(mock_request, mock_sleep, sharp):
    mock_request.side_effect = [
        make_response(job_status("pending"), headers={"Retry-After": "3"}),
        make_response(job_status("in_progress")),
        make_response(job_status("success", "Bonjour")),
    ]

    result = sharp.fetch_result(JobHandle("job-1", "https://sharpapi.com/status/job-1"))

    assert result.content == "Bonjour"
    assert mock_request.call_count == 3
    assert [c[0][0] for c in mock_sleep.call_args_list] == [3.0, 2]


@patch("ai_translator.translation.provider.time.sleep")
@patch("ai_translator.translation.provider.requests.request")
def test_fetch_result_missing_content_is_empty(mock_request, mock_sleep, sharp):
    mock_request.return_value = make_response(job_status("success"))

    result = sharp.fetch_result(JobHandle("job-1", "https://sharpapi.com/status/job-1"))

    assert result.content == ""


@patch("ai_translator.translation.provider.time.sleep")
@patch("ai_translator.translation.provider.requests.request")
def test_fetch_result_failed_job(mock_request, mock_sleep, sharp):
    mock_request.return_value = make_response(job_status("failed"))

    with pytest.raises(ProviderError, match="failed"):
        sharp.fetch_result(JobHandle("job-1", "https://sharpapi.com/status/job-1"))


@patch("ai_translator.translation.provider.time.sleep")
@patch("ai_translator.translation.provider.requests.request")
def test_fetch_result_gives_up_after_timeout(mock_request, mock_sleep, sharp):
    mock_request.return_value = make_response(job_status("pending"), headers={"Retry-After": "10"})

    with pytest.raises(ProviderError, match="did not finish"):
        sharp.fetch_result(JobHandle("job-1", "https://sharpapi.com/status/job-1"), timeout=5)

    mock_sleep.assert_not_called()


def test_create_provider_from_config():
    provider = create_provider({"provider": "sharpapi", "api_key": "k", "poll_interval": 1})

    assert isinstance(provider, SharpApiProvider)
    assert provider.api_key == "k"
    assert provider.poll_interval == 1


def test_create_provider_unknown():
    with pytest.raises(ValueError):
        create_provider({"provider": "babelfish"})


def test_whitespace_api_key_is_not_configured():
    assert not SharpApiProvider(api_key="   ").is_configured()


def test_translate_submits_and_waits(fake_provider_class):
    provider = fake_provider_class()

    text = provider.translate("Hello", "French", "neutral", "Source language is English", timeout=30)

    assert text == "[French] Hello"
    assert provider.submissions[0]["context"] == "Source language is English"
    assert provider.fetch_timeouts == [30]


@patch("ai_translator.translation.provider.time.sleep")
@patch("ai_translator.translation.provider.requests.request")
def test_translate_returns_empty_text_without_content(mock_request, mock_sleep, sharp):
    mock_request.side_effect = [
        make_response({"status_url": "https://sharpapi.com/status/job-1", "job_id": "job-1"}, status_code=202),
        make_response(job_status("success")),
    ]

    assert sharp.translate("Hello", "French", "neutral", "Source language is English") == ""
    assert [c[0][0] for c in mock_request.call_args_list] == ["POST", "GET"]
