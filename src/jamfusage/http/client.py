from __future__ import annotations
import json as _json
from typing import Any, Dict, Optional
import requests

from jamfusage.http.errors import (
    HttpError, UnauthorizedError, ForbiddenError, NotFoundError,
    ServerError, NetworkError, ParseError
)


class HttpClient:
    """
    Thin blocking transport. One attempt per call: any failure is raised as a
    typed FetchError and never retried.
    """
    def __init__(self, base_url: str = "", timeout: float | None = None, logger=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._log = logger  # optional, expects .debug()

    def _full_url(self, url: str) -> str:
        if url.startswith("http://") or url.startswith("https://"):
            return url
        if self.base_url:
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    def _log_debug(self, msg: str, *args) -> None:
        if self._log:
            self._log.debug(msg, *args)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None
    ) -> requests.Response:
        full = self._full_url(url)
        self._log_debug("HTTP %s %s", method.upper(), full)
        try:
            resp = self._session.request(
                method=method.upper(),
                url=full,
                headers=headers or {},
                params=params,
                data=data,
                json=json,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as ex:
            raise NetworkError(-1, full, str(ex)) from ex

        if resp.status_code < 400:
            self._log_debug("HTTP %s %s", resp.status_code, full)
            return resp

        # Map to typed errors
        body_snip = _safe_snip(resp)
        if resp.status_code == 401:
            raise UnauthorizedError(401, full, "Unauthorized", body_snip)
        if resp.status_code == 403:
            raise ForbiddenError(403, full, "Forbidden", body_snip)
        if resp.status_code == 404:
            raise NotFoundError(404, full, "Not Found", body_snip)
        if 500 <= resp.status_code <= 599:
            raise ServerError(resp.status_code, full, "Server error", body_snip)
        raise HttpError(resp.status_code, full, f"HTTP {resp.status_code}", body_snip)

    # ---------- Convenience helpers ----------
    def get_json(self, url: str, **kwargs) -> dict:
        r = self.request("GET", url, **kwargs)
        return _parse(r)


def _parse(resp: requests.Response) -> dict:
    try:
        data = _json.loads(resp.text or "{}")
    except ValueError as ex:
        raise ParseError(resp.url, f"Invalid JSON from {resp.url}: {ex}") from ex
    if not isinstance(data, dict):
        raise ParseError(resp.url, f"Expected a JSON object from {resp.url}, got {type(data).__name__}")
    return data


def _safe_snip(resp: requests.Response, max_len: int = 400) -> str:
    txt = resp.text or ""
    return txt[:max_len]
