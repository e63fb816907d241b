# src/jamfusage/core/object_service.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from jamfusage.core.jamf_client import JamfClient
from jamfusage.core.models import (
    ConfigObject, Category, ComputerGroup, Policy, ConfigurationProfile,
    ExtensionAttribute, Package, Script, AdvancedComputerSearch, ComputerPrestage,
)
from jamfusage.core.scope import summarize

logger = logging.getLogger(__name__)


def _category_name(general: Dict[str, Any]) -> Optional[str]:
    cat = general.get("category")
    if isinstance(cat, dict):
        return cat.get("name")
    return cat

def _scopes(detail: Dict[str, Any]) -> Dict[str, str]:
    scope = detail.get("scope") or {}
    return {
        "scope_targets": summarize(scope),
        "scope_limitations": summarize(scope.get("limitations")),
        "scope_exclusions": summarize(scope.get("exclusions")),
    }


class ObjectCatalog:
    """
    Flat list of every configuration object on the server, one entry per
    object, grouped by type in a fixed order and in list order within a type.
    """
    def __init__(self, jamf: JamfClient):
        self.jamf = jamf

    def build(self) -> List[ConfigObject]:
        objects: List[ConfigObject] = []
        for step in (
            self._categories,
            self._computer_groups,
            self._policies,
            self._configuration_profiles,
            self._extension_attributes,
            self._packages,
            self._scripts,
            self._advanced_computer_searches,
            self._computer_prestages,
        ):
            objects.extend(step())
        logger.info("Catalog built: %d objects", len(objects))
        return objects

    # ---------- summary-only types ----------
    def _categories(self) -> List[ConfigObject]:
        logger.info("Get Categories")
        return [
            Category(id=r.get("id"), name=r.get("name"), priority=r.get("priority"))
            for r in self.jamf.get_categories()
        ]

    def _computer_groups(self) -> List[ConfigObject]:
        logger.info("Get Computer Groups")
        return [
            ComputerGroup(id=r.get("id"), name=r.get("name"), is_smart=r.get("is_smart"))
            for r in self.jamf.get_computer_groups()
        ]

    def _advanced_computer_searches(self) -> List[ConfigObject]:
        logger.info("Get Advanced Computer Searches")
        return [
            AdvancedComputerSearch(id=r.get("id"), name=r.get("name"))
            for r in self.jamf.get_advanced_computer_searches()
        ]

    def _computer_prestages(self) -> List[ConfigObject]:
        logger.info("Get Computer Prestages")
        return [
            ComputerPrestage(id=r.get("id"), name=r.get("displayName"))
            for r in self.jamf.get_computer_prestages()
        ]

    # ---------- list-then-get types ----------
    def _policies(self) -> List[ConfigObject]:
        logger.info("Get Policies")
        out: List[ConfigObject] = []
        for summary in self.jamf.get_policies():
            r = self.jamf.get_policy(summary["id"])
            general = r.get("general") or {}
            out.append(Policy(
                id=general.get("id"),
                name=general.get("name"),
                category=_category_name(general),
                enabled=general.get("enabled"),
                **_scopes(r),
            ))
        return out

    def _configuration_profiles(self) -> List[ConfigObject]:
        logger.info("Get Configuration Profiles")
        out: List[ConfigObject] = []
        for summary in self.jamf.get_configuration_profiles():
            r = self.jamf.get_configuration_profile(summary["id"])
            general = r.get("general") or {}
            out.append(ConfigurationProfile(
                id=general.get("id"),
                name=general.get("name"),
                category=_category_name(general),
                **_scopes(r),
            ))
        return out

    def _extension_attributes(self) -> List[ConfigObject]:
        logger.info("Get Extension Attributes")
        out: List[ConfigObject] = []
        for summary in self.jamf.get_extension_attributes():
            r = self.jamf.get_extension_attribute(summary["id"])
            out.append(ExtensionAttribute(id=r.get("id"), name=r.get("name"), enabled=r.get("enabled")))
        return out

    def _packages(self) -> List[ConfigObject]:
        logger.info("Get Packages")
        out: List[ConfigObject] = []
        for summary in self.jamf.get_packages():
            r = self.jamf.get_package(summary["id"])
            out.append(Package(id=r.get("id"), name=r.get("name"), category=_category_name(r)))
        return out

    def _scripts(self) -> List[ConfigObject]:
        logger.info("Get Scripts")
        out: List[ConfigObject] = []
        for summary in self.jamf.get_scripts():
            r = self.jamf.get_script(summary["id"])
            out.append(Script(id=r.get("id"), name=r.get("name"), category=_category_name(r)))
        return out
