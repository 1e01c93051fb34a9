import pytest

from velocity_mcp.config.settings import Settings
from velocity_mcp.domain.auth import AuthMode, build_auth_headers, classify_credential


@pytest.mark.parametrize(
    "credential",
    [
        "VelocitySession=abc123",
        "SecurityApiSession=xyz",
        "foo=1; VelocitySession=abc; SecurityApiSession=def",
        "prefixSecurityApiSession=suffix",
    ],
)
def test_session_cookie_markers(credential):
    assert classify_credential(credential) is AuthMode.SESSION_COOKIE


@pytest.mark.parametrize(
    "credential",
    [
        "ak-123456",
        "",
        "velocitysession=abc",  # case-sensitive
        "VelocitySession",  # no '='
        "Session=abc",
    ],
)
def test_anything_else_is_an_access_key(credential):
    assert classify_credential(credential) is AuthMode.ACCESS_KEY


def test_classification_is_deterministic():
    for credential in ("VelocitySession=1", "plain-key"):
        assert {classify_credential(credential) for _ in range(5)} == {
            classify_credential(credential)
        }


def test_auth_headers():
    assert build_auth_headers("VelocitySession=1", AuthMode.SESSION_COOKIE) == {
        "Cookie": "VelocitySession=1"
    }
    assert build_auth_headers("ak-1", AuthMode.ACCESS_KEY) == {
        "Authorization": "UserAccessKey ak-1"
    }


def _settings(token: str, auth_mode: str = "auto") -> Settings:
    return Settings(
        graphql_url="https://v.example.com/graphql",
        access_token=token,
        tenant_id="t1",
        auth_mode=auth_mode,
        _env_file=None,
    )


def test_settings_classify_in_auto_mode():
    assert _settings("VelocitySession=1").credential_mode is AuthMode.SESSION_COOKIE
    assert _settings("ak-1").credential_mode is AuthMode.ACCESS_KEY


def test_explicit_auth_mode_overrides_classification():
    assert _settings("ak-1", "session_cookie").credential_mode is AuthMode.SESSION_COOKIE
    assert (
        _settings("VelocitySession=1", "access_key").credential_mode is AuthMode.ACCESS_KEY
    )
