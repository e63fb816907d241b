from __future__ import annotations
from dataclasses import dataclass

class AuthError(Exception):
    code = "auth_error"; hint = "Unknown error."
    def __init__(self, message: str = "", *, hint: str | None = None):
        super().__init__(message or self.__class__.__name__)
        if hint: self.hint = hint

class InvalidServer(AuthError):
    code = "invalid_server"; hint = "Jamf Pro server invalid or unreachable."
class InvalidClientId(AuthError):
    code = "invalid_client_id"; hint = "API client ID invalid."
class InvalidClientSecret(AuthError):
    code = "invalid_client_secret"; hint = "API client secret rejected."
class NetworkError(AuthError):
    code = "network_error"; hint = "Network or timeout issue."

@dataclass
class ServerSession:
    server: str
    base_url: str
    token: str
    expires_in: int | None = None

    def get_bearer_token(self) -> str:
        return self.token

def connect(creds: dict, *, timeout: float | None = None) -> ServerSession:
    server = (creds.get("server") or "").strip()
    client_id = (creds.get("client_id") or "").strip()
    client_secret = (creds.get("client_secret") or "").strip()

    if not server: raise InvalidServer("Server required.")
    if not client_id: raise InvalidClientId("Client ID required.")
    if not client_secret: raise InvalidClientSecret("Client Secret required.")

    from jamfusage.core.auth_helpers import build_base_url, request_token

    base_url = build_base_url(server)
    token, expires_in = request_token(base_url, client_id, client_secret, timeout=timeout)
    return ServerSession(server=server, base_url=base_url, token=token, expires_in=expires_in)
