# src/jamfusage/core/jamf_client.py
from __future__ import annotations
from typing import Any, Callable, Dict, List
from jamfusage.http.client import HttpClient
from jamfusage.core.pagination import PageFetcher, DEFAULT_PAGE_SIZE


class JamfClient:
    """
    Jamf Pro wrapper over both the Classic API (/JSSResource) and the
    Jamf Pro API (/api/<version>). Token is provided lazily via token_provider().
    """
    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], str],
        timeout: float | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        logger=None,
    ):
        self._token_provider = token_provider
        self._http = HttpClient(base_url=base_url, timeout=timeout, logger=logger)
        self._pages = PageFetcher(self._pro_get_json, page_size=page_size)

    def _auth_headers(self, extra: Dict[str, str] | None = None) -> Dict[str, str]:
        h = {
            "Authorization": f"Bearer {self._token_provider()}",
            "Accept": "application/json",
        }
        if extra:
            h.update(extra)
        return h

    def _pro_get_json(self, path: str, *, params: Dict[str, Any] | None = None) -> dict:
        return self._http.get_json(path, headers=self._auth_headers(), params=params)

    # ---------- Classic API ----------
    def classic_list(self, path: str, key: str, *, params: Dict[str, Any] | None = None) -> List[dict]:
        data = self._http.get_json(f"/JSSResource/{path}", headers=self._auth_headers(), params=params)
        return data.get(key) or []

    def classic_get(self, path: str, id_, key: str, *, params: Dict[str, Any] | None = None) -> dict:
        data = self._http.get_json(f"/JSSResource/{path}/id/{id_}", headers=self._auth_headers(), params=params)
        return data.get(key) or {}

    # ---------- Jamf Pro API ----------
    def pro_list(self, path: str, version: str, *, params: Dict[str, Any] | None = None) -> List[dict]:
        return self._pages.fetch_all(f"/api/{version}/{path}", params)

    # ---------- categories ----------
    def get_categories(self, params=None) -> List[dict]:
        return self.pro_list("categories", "v1", params=params)

    # ---------- computer groups ----------
    def get_computer_groups(self) -> List[dict]:
        return self.classic_list("computergroups", "computer_groups")

    def get_computer_group(self, id_) -> dict:
        return self.classic_get("computergroups", id_, "computer_group")

    # ---------- policies ----------
    def get_policies(self) -> List[dict]:
        return self.classic_list("policies", "policies")

    def get_policy(self, id_) -> dict:
        return self.classic_get("policies", id_, "policy")

    # ---------- configuration profiles (macOS) ----------
    def get_configuration_profiles(self) -> List[dict]:
        return self.classic_list("osxconfigurationprofiles", "os_x_configuration_profiles")

    def get_configuration_profile(self, id_) -> dict:
        return self.classic_get("osxconfigurationprofiles", id_, "os_x_configuration_profile")

    # ---------- extension attributes ----------
    def get_extension_attributes(self) -> List[dict]:
        return self.classic_list("computerextensionattributes", "computer_extension_attributes")

    def get_extension_attribute(self, id_) -> dict:
        return self.classic_get("computerextensionattributes", id_, "computer_extension_attribute")

    # ---------- packages ----------
    def get_packages(self) -> List[dict]:
        return self.classic_list("packages", "packages")

    def get_package(self, id_) -> dict:
        return self.classic_get("packages", id_, "package")

    # ---------- scripts ----------
    def get_scripts(self) -> List[dict]:
        return self.classic_list("scripts", "scripts")

    def get_script(self, id_) -> dict:
        return self.classic_get("scripts", id_, "script")

    # ---------- advanced computer searches ----------
    def get_advanced_computer_searches(self) -> List[dict]:
        return self.classic_list("advancedcomputersearches", "advanced_computer_searches")

    def get_advanced_computer_search(self, id_) -> dict:
        return self.classic_get("advancedcomputersearches", id_, "advanced_computer_search")

    # ---------- computer prestages ----------
    def get_computer_prestages(self, params=None) -> List[dict]:
        return self.pro_list("computer-prestages", "v3", params=params)
