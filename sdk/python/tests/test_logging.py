"""
Tests for azdo logging: tokens and authorization headers never reach the logs.
"""

import io
import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from azdo.logging import (
    configure_logging,
    get_logger,
    log_http_request,
    log_http_response,
    mask_sensitive_data,
    safe_log_dict,
)

token_strategy = st.text(
    alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"),
    min_size=20,
    max_size=60,
)


@given(token=token_strategy)
@settings(max_examples=100)
def test_authorization_header_is_masked(token: str) -> None:
    for scheme in ("Basic", "Bearer"):
        masked = mask_sensitive_data(f"headers={{'Authorization': '{scheme} {token}'}}")
        assert token not in masked
        assert "[REDACTED]" in masked


@given(token=token_strategy)
@settings(max_examples=100)
def test_token_values_are_masked(token: str) -> None:
    for key in ("token", "password", "secret", "pat"):
        masked = mask_sensitive_data(f"{{'{key}': '{token}'}}")
        assert token not in masked


def test_unrelated_text_is_untouched() -> None:
    text = "GET org/project/_apis/git/repositories/repo | params={'path': '/main.tf'}"
    assert mask_sensitive_data(text) == text


def test_safe_log_dict_masks_nested_keys() -> None:
    data = {
        "Authorization": "Basic abc",
        "content": "Ran Plan",
        "nested": {"token": "t", "ok": 1},
        "items": [{"password": "p"}, "plain"],
    }

    assert safe_log_dict(data) == {
        "Authorization": "[REDACTED]",
        "content": "Ran Plan",
        "nested": {"token": "[REDACTED]", "ok": 1},
        "items": [{"password": "[REDACTED]"}, "plain"],
    }
    assert data["nested"]["token"] == "t"


def test_http_logging_only_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="azdo.http"):
        log_http_request("GET", "org/_apis/x", params={"api-version": "6.0"})
        log_http_response(200, "org/_apis/x", body={"id": 1}, elapsed_ms=3.0)

    assert caplog.records == []


def test_http_logging_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="azdo.http"):
        log_http_request("POST", "org/_apis/x", params={"api-version": "6.0"}, body={"token": "s3cr3t"})
        log_http_response(201, "org/_apis/x", body={"id": 1}, elapsed_ms=12.5)

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0].startswith("POST org/_apis/x")
    assert "s3cr3t" not in messages[0]
    assert "Response 201 from org/_apis/x" in messages[1]
    assert "elapsed=12.50ms" in messages[1]
    assert all(record.name == "azdo.http" for record in caplog.records)


def test_configure_logging_levels() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    sdk_logger = get_logger()

    try:
        configure_logging(
            level=logging.WARNING,
            http_level=logging.DEBUG,
            handler=handler,
            format_string="%(name)s %(message)s",
        )

        assert sdk_logger.level == logging.WARNING
        assert get_logger("http").level == logging.DEBUG
        assert get_logger("identity").level == logging.WARNING

        get_logger("identity").warning("learned user GUID")
        assert "azdo.identity learned user GUID" in stream.getvalue()
    finally:
        sdk_logger.removeHandler(handler)
        sdk_logger.setLevel(logging.NOTSET)
        get_logger("http").setLevel(logging.NOTSET)
        get_logger("identity").setLevel(logging.NOTSET)


def test_only_whole_key_names_are_masked() -> None:
    text = "{'compat': 'v2', 'xpat': 'v3', 'tokens': 'v4'}"
    assert mask_sensitive_data(text) == text
