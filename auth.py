# auth.py — Google OAuth2 refresh-token exchange
from __future__ import annotations

import logging
from typing import Optional

import requests

from config import GoogleCredentials
from errors import AuthRefreshError

log = logging.getLogger("drivesync.auth")

TOKEN_URL = "https://oauth2.googleapis.com/token"


def refresh_access_token(
    credentials: GoogleCredentials,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Exchange the refresh token for a short-lived access token.

    One POST, no retry. On a non-2xx answer the response body is logged and
    AuthRefreshError is raised. Neither the secrets nor the returned token are
    ever logged.
    """
    http = session or requests
    log.info("Requesting new access token from Google...")

    try:
        r = http.post(
            TOKEN_URL,
            data={
                "client_id": credentials.client_id,
                "client_secret": credentials.client_secret,
                "refresh_token": credentials.refresh_token,
                "grant_type": "refresh_token",
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
    except requests.RequestException as exc:
        log.error("Token request did not complete: %s", exc.__class__.__name__)
        raise AuthRefreshError(f"Token request failed: {exc.__class__.__name__}", body=str(exc)) from exc

    if not r.ok:
        body = r.text
        log.error("Token refresh failed (HTTP %s): %s", r.status_code, body)
        raise AuthRefreshError("Failed to refresh Google token", status_code=r.status_code, body=body)

    try:
        access_token = r.json().get("access_token")
    except ValueError as exc:
        raise AuthRefreshError("Token endpoint returned invalid JSON", status_code=r.status_code) from exc
    if not access_token:
        raise AuthRefreshError("Token endpoint response has no access_token", status_code=r.status_code)

    log.info("New access token acquired.")
    return access_token
