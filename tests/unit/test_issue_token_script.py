"""Unit tests for the local token signing script."""

from hub.config import AuthSettings
from hub.util.jwt import decode_token
from scripts.issue_token import main


def test_signs_access_token(monkeypatch, capsys):
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("AUTH__JWT_SECRET", "dev-secret")

    assert main(["issue_token.py", "user-1"]) == 0

    token = capsys.readouterr().out.strip()
    payload = decode_token(token, AuthSettings(jwt_secret="dev-secret"))
    assert payload.user_id == "user-1"
    assert payload.type == "access"


def test_signs_refresh_token(monkeypatch, capsys):
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("AUTH__JWT_SECRET", "dev-secret")

    assert main(["issue_token.py", "user-1", "refresh"]) == 0

    token = capsys.readouterr().out.strip()
    payload = decode_token(token, AuthSettings(jwt_secret="dev-secret"))
    assert payload.type == "refresh"


def test_unknown_token_type(capsys):
    assert main(["issue_token.py", "user-1", "session"]) == 2
    assert "Usage" in capsys.readouterr().err


def test_refused_in_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")

    assert main(["issue_token.py", "user-1"]) == 1
