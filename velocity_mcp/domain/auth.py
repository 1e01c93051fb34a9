"""Credential classification.

The service accepts either a browser session cookie bundle or a user access
key. Which one a credential is decides the authentication header.
"""

from enum import Enum

SESSION_COOKIE_MARKERS = ("VelocitySession=", "SecurityApiSession=")


class AuthMode(str, Enum):
    """How the credential is presented to the service."""

    SESSION_COOKIE = "session_cookie"
    ACCESS_KEY = "access_key"


def classify_credential(credential: str) -> AuthMode:
    """
    Classify a credential by looking for session cookie names.

    Args:
        credential: Opaque credential string from configuration

    Returns:
        AuthMode.SESSION_COOKIE if either session cookie name appears,
        AuthMode.ACCESS_KEY otherwise

    Example:
        classify_credential("VelocitySession=abc; Path=/")
        # AuthMode.SESSION_COOKIE

        classify_credential("d3adb33f")
        # AuthMode.ACCESS_KEY
    """
    if any(marker in credential for marker in SESSION_COOKIE_MARKERS):
        return AuthMode.SESSION_COOKIE
    return AuthMode.ACCESS_KEY


def build_auth_headers(credential: str, mode: AuthMode) -> dict[str, str]:
    """Header carrying the credential for the given mode."""
    if mode is AuthMode.SESSION_COOKIE:
        return {"Cookie": credential}
    return {"Authorization": f"UserAccessKey {credential}"}
