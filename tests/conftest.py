"""Pytest configuration and shared fixtures.

Provides an in-memory stand-in for the Jamf Pro API client with a small,
fixed data set used across the builder and orchestrator tests.
"""

import copy

import pytest

from jamfusage.app import event_bus
from jamfusage.http.errors import NotFoundError


class FakeJamf:
    """Serves list/detail records from dicts and logs every call."""

    def __init__(self, data: dict) -> None:
        self.data = copy.deepcopy(data)
        self.calls: list[tuple] = []
        self.fail_on: set[tuple] = set()

    def _call(self, name: str, *args):
        self.calls.append((name, *args))
        if (name, *args) in self.fail_on:
            raise NotFoundError(404, f"/fake/{name}/{args}", "Not Found")

    def _list(self, name: str, key: str) -> list:
        self._call(name)
        return copy.deepcopy(self.data.get(key, []))

    def _detail(self, name: str, key: str, id_) -> dict:
        self._call(name, id_)
        return copy.deepcopy(self.data[key][id_])

    def get_categories(self):
        return self._list("get_categories", "categories")

    def get_computer_groups(self):
        return self._list("get_computer_groups", "computer_groups")

    def get_computer_group(self, id_):
        return self._detail("get_computer_group", "computer_group", id_)

    def get_policies(self):
        return self._list("get_policies", "policies")

    def get_policy(self, id_):
        return self._detail("get_policy", "policy", id_)

    def get_configuration_profiles(self):
        return self._list("get_configuration_profiles", "configuration_profiles")

    def get_configuration_profile(self, id_):
        return self._detail("get_configuration_profile", "configuration_profile", id_)

    def get_extension_attributes(self):
        return self._list("get_extension_attributes", "extension_attributes")

    def get_extension_attribute(self, id_):
        return self._detail("get_extension_attribute", "extension_attribute", id_)

    def get_packages(self):
        return self._list("get_packages", "packages")

    def get_package(self, id_):
        return self._detail("get_package", "package", id_)

    def get_scripts(self):
        return self._list("get_scripts", "scripts")

    def get_script(self, id_):
        return self._detail("get_script", "script", id_)

    def get_advanced_computer_searches(self):
        return self._list("get_advanced_computer_searches", "advanced_computer_searches")

    def get_advanced_computer_search(self, id_):
        return self._detail("get_advanced_computer_search", "advanced_computer_search", id_)

    def get_computer_prestages(self):
        return self._list("get_computer_prestages", "computer_prestages")


def _scope(groups, excluded, all_computers=False, limit_names=()):
    return {
        "all_computers": all_computers,
        "computers": [],
        "computer_groups": [{"id": g, "name": n} for g, n in groups],
        "buildings": [],
        "limitations": {
            "users": [],
            "network_segments": [{"id": i, "name": n} for i, n in enumerate(limit_names, 1)],
        },
        "exclusions": {
            "computers": [],
            "computer_groups": [{"id": g, "name": n} for g, n in excluded],
        },
    }


JAMF_DATA = {
    "categories": [
        {"id": "1", "name": "Security", "priority": 9},
        {"id": "2", "name": "Apps", "priority": 5},
    ],
    "computer_groups": [
        {"id": 10, "name": "All Managed", "is_smart": True},
        {"id": 11, "name": "Pilot", "is_smart": False},
    ],
    "computer_group": {
        10: {
            "id": 10, "name": "All Managed", "is_smart": True,
            "criteria": [
                {"name": "Computer Group", "search_type": "member of", "value": "Pilot"},
                {"name": "Some Unknown Criteria", "search_type": "is", "value": "x"},
                {"name": "Profile Name", "search_type": "has", "value": "Wi-Fi"},
            ],
        },
        11: {"id": 11, "name": "Pilot", "is_smart": False, "criteria": []},
    },
    "policies": [{"id": 100, "name": "Install Chrome"}],
    "policy": {
        100: {
            "general": {
                "id": 100, "name": "Install Chrome", "enabled": True,
                "category": {"id": 2, "name": "Apps"},
            },
            "scope": _scope([(10, "All Managed"), (11, "Pilot")], [(12, "Servers")],
                            limit_names=("Office LAN",)),
            "scripts": [{"id": 300, "name": "postinstall.sh"}],
            "package_configuration": {"packages": [{"id": 200, "name": "Chrome.pkg"}]},
        },
    },
    "configuration_profiles": [{"id": 400, "name": "Wi-Fi"}],
    "configuration_profile": {
        400: {
            "general": {"id": 400, "name": "Wi-Fi", "category": {"id": 1, "name": "Security"}},
            "scope": _scope([], [(11, "Pilot")], all_computers=True),
        },
    },
    "extension_attributes": [{"id": 500, "name": "Battery Health"}],
    "extension_attribute": {500: {"id": 500, "name": "Battery Health", "enabled": False}},
    "packages": [{"id": 200, "name": "Chrome.pkg"}],
    "package": {200: {"id": 200, "name": "Chrome.pkg", "category": "Apps"}},
    "scripts": [{"id": 300, "name": "postinstall.sh"}],
    "script": {300: {"id": 300, "name": "postinstall.sh", "category": "No category assigned"}},
    "advanced_computer_searches": [{"id": 600, "name": "Old Chrome"}],
    "advanced_computer_search": {
        600: {
            "id": 600, "name": "Old Chrome",
            "criteria": [
                {"name": "Cached Packages", "search_type": "has", "value": "Chrome.pkg"},
                {"name": "Operating System Version", "search_type": "less than", "value": "14"},
            ],
        },
    },
    "computer_prestages": [
        {
            "id": "1", "displayName": "Staff DEP",
            "customPackageIds": [200],
            "prestageInstalledProfileIds": [400],
        },
    ],
}


@pytest.fixture
def jamf_data() -> dict:
    """A deep copy of the shared server data set."""
    return copy.deepcopy(JAMF_DATA)


@pytest.fixture
def fake_jamf(jamf_data: dict) -> FakeJamf:
    """Fake API client serving the shared data set."""
    return FakeJamf(jamf_data)


@pytest.fixture(autouse=True)
def clean_event_bus():
    """Isolate event bus subscriptions per test."""
    saved = dict(event_bus._subs)
    event_bus._subs.clear()
    yield
    event_bus._subs.clear()
    event_bus._subs.update(saved)
