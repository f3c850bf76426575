# tests/test_mailer.py
from __future__ import annotations

import asyncio
import logging
import smtplib

import pytest

from services import mailer


def test_reset_message_contains_link():
    msg = mailer.build_reset_message("a@b.io", "abc123")
    assert msg["To"] == "a@b.io"
    assert msg["Subject"] == "Password Reset Request"
    html = msg.get_body(preferencelist=("html",)).get_content()
    assert "/reset-password/abc123" in html
    assert "1 hour" in html


def test_smtp_failure_is_wrapped(monkeypatch):
    def _boom(msg):
        raise smtplib.SMTPServerDisconnected("gone")

    monkeypatch.setattr(mailer, "_send", _boom)
    with pytest.raises(mailer.EmailDeliveryError):
        asyncio.run(mailer.send_password_reset_email("a@b.io", "tok"))


def test_send_uses_smtp(monkeypatch, caplog):
    sent = []
    monkeypatch.setattr(mailer, "_send", sent.append)
    monkeypatch.setattr(mailer.settings, "env_name", "local")
    caplog.set_level(logging.INFO, logger="services.mailer")

    asyncio.run(mailer.send_password_reset_email("a@b.io", "tok"))

    assert len(sent) == 1 and sent[0]["To"] == "a@b.io"
    assert "/reset-password/tok" in caplog.text


def test_reset_link_not_logged_in_production(monkeypatch, caplog):
    monkeypatch.setattr(mailer, "_send", lambda msg: None)
    monkeypatch.setattr(mailer.settings, "env_name", "production")
    caplog.set_level(logging.INFO, logger="services.mailer")

    asyncio.run(mailer.send_password_reset_email("a@b.io", "tok"))

    assert "/reset-password/tok" not in caplog.text
