from __future__ import annotations
import logging
from typing import Tuple
import requests

from jamfusage.core.auth import (
    AuthError, InvalidServer, InvalidClientId, InvalidClientSecret, NetworkError
)

TOKEN_PATH = "/api/oauth/token"

logger = logging.getLogger(__name__)

def build_base_url(server: str) -> str:
    return f"https://{server}"

def _map_token_error(status: int, body: dict) -> AuthError:
    err = (body.get("error") or "").lower()
    desc = body.get("error_description") or err or f"HTTP {status}"
    if err == "invalid_client":
        return InvalidClientSecret(f"Client credentials rejected: {desc}")
    if err == "unauthorized_client":
        return InvalidClientId(f"Client not authorized: {desc}")
    if status == 404:
        return InvalidServer("Token endpoint not found; check the server name.")
    if status in (400, 401):
        return InvalidClientSecret(f"Client credentials rejected: {desc}")
    return AuthError(desc)

def request_token(
    base_url: str, client_id: str, client_secret: str, timeout: float | None = None
) -> Tuple[str, int | None]:
    url = f"{base_url}{TOKEN_PATH}"
    payload = {
        "client_id": client_id,
        "client_secret": client_secret,
        "grant_type": "client_credentials",
    }
    logger.debug("Requesting token from %s (client %s...)", url, client_id[:6])
    try:
        r = requests.post(url, data=payload, headers={"Accept": "application/json"}, timeout=timeout)
    except requests.exceptions.RequestException as ex:
        raise NetworkError(str(ex)) from ex

    try:
        body = r.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    if r.status_code >= 400:
        raise _map_token_error(r.status_code, body)

    token = body.get("access_token")
    if not token:
        raise AuthError("Malformed token response: no access_token.")
    return token, body.get("expires_in")
