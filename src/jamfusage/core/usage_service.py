# src/jamfusage/core/usage_service.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from jamfusage.core.jamf_client import JamfClient
from jamfusage.core.models import ObjectType, UsageEdge

logger = logging.getLogger(__name__)

# Smart group / advanced search criteria that point at another object.
# Anything not listed here is not a reference we model and is skipped.
CRITERIA_USAGE_TYPES: Dict[str, ObjectType] = {
    "Computer Group": ObjectType.COMPUTER_GROUP,
    "Enrollment Method: PreStage enrollment": ObjectType.COMPUTER_PRESTAGE,
    "Packages Installed By Casper": ObjectType.PACKAGE,
    "Packages Installed By Installer.app/SWU": ObjectType.PACKAGE,
    "Cached Packages": ObjectType.PACKAGE,
    "Profile Name": ObjectType.CONFIGURATION_PROFILE,
}

SCOPE_TARGETS = "scope:targets"
SCOPE_EXCLUSIONS = "scope:exclusions"


def criteria_usage_type(criteria_name: str) -> Optional[ObjectType]:
    return CRITERIA_USAGE_TYPES.get(criteria_name)

def criteria_location(search_type: str) -> str:
    return "criteria:" + (search_type or "").replace(" ", "_")


class UsageGraphBuilder:
    """
    Who-uses-what report: one UsageEdge per reference from a group, search,
    policy, profile or prestage to another object. Any fetch error aborts the
    whole build.
    """
    def __init__(self, jamf: JamfClient):
        self.jamf = jamf

    def build(self) -> List[UsageEdge]:
        edges: List[UsageEdge] = []
        edges.extend(self._computer_groups())
        edges.extend(self._policies())
        edges.extend(self._configuration_profiles())
        edges.extend(self._advanced_computer_searches())
        edges.extend(self._computer_prestages())
        logger.info("Usage report built: %d edges", len(edges))
        return edges

    # ---------- criteria (smart groups, advanced searches) ----------
    def _criteria_edges(self, source_type: ObjectType, record: Dict[str, Any]) -> List[UsageEdge]:
        out: List[UsageEdge] = []
        for criteria in record.get("criteria") or []:
            usage_type = criteria_usage_type(criteria.get("name"))
            if usage_type is None:
                continue
            out.append(UsageEdge(
                type=source_type,
                id=record.get("id"),
                name=record.get("name"),
                usage_type=usage_type,
                usage_location=criteria_location(criteria.get("search_type")),
                usage_name=criteria.get("value"),
            ))
        return out

    def _computer_groups(self) -> List[UsageEdge]:
        logger.info("Get Computer Groups")
        out: List[UsageEdge] = []
        for summary in self.jamf.get_computer_groups():
            record = self.jamf.get_computer_group(summary["id"])
            if record.get("is_smart") is True:
                out.extend(self._criteria_edges(ObjectType.COMPUTER_GROUP, record))
        return out

    def _advanced_computer_searches(self) -> List[UsageEdge]:
        logger.info("Get Advanced Computer Searches")
        out: List[UsageEdge] = []
        for summary in self.jamf.get_advanced_computer_searches():
            record = self.jamf.get_advanced_computer_search(summary["id"])
            out.extend(self._criteria_edges(ObjectType.ADVANCED_COMPUTER_SEARCH, record))
        return out

    # ---------- scoped objects (policies, profiles) ----------
    def _usages(
        self,
        usages: List[Dict[str, Any]],
        general: Dict[str, Any],
        source_type: ObjectType,
        usage_type: ObjectType,
        usage_location: Optional[str] = None,
    ) -> List[UsageEdge]:
        category = general.get("category")
        if isinstance(category, dict):
            category = category.get("name")
        return [
            UsageEdge(
                type=source_type,
                id=general.get("id"),
                name=general.get("name"),
                category=category,
                enabled=general.get("enabled"),
                usage_type=usage_type,
                usage_location=usage_location,
                usage_id=u.get("id"),
                usage_name=u.get("name"),
            )
            for u in usages or []
        ]

    def _scope_edges(self, record: Dict[str, Any], source_type: ObjectType) -> List[UsageEdge]:
        general = record.get("general") or {}
        scope = record.get("scope") or {}
        exclusions = scope.get("exclusions") or {}
        return (
            self._usages(scope.get("computer_groups"), general, source_type,
                         ObjectType.COMPUTER_GROUP, SCOPE_TARGETS)
            + self._usages(exclusions.get("computer_groups"), general, source_type,
                           ObjectType.COMPUTER_GROUP, SCOPE_EXCLUSIONS)
        )

    def _policies(self) -> List[UsageEdge]:
        logger.info("Get Policies")
        out: List[UsageEdge] = []
        for summary in self.jamf.get_policies():
            record = self.jamf.get_policy(summary["id"])
            general = record.get("general") or {}
            packages = (record.get("package_configuration") or {}).get("packages")
            out.extend(self._scope_edges(record, ObjectType.POLICY))
            out.extend(self._usages(record.get("scripts"), general, ObjectType.POLICY, ObjectType.SCRIPT))
            out.extend(self._usages(packages, general, ObjectType.POLICY, ObjectType.PACKAGE))
        return out

    def _configuration_profiles(self) -> List[UsageEdge]:
        logger.info("Get Configuration Profiles")
        out: List[UsageEdge] = []
        for summary in self.jamf.get_configuration_profiles():
            record = self.jamf.get_configuration_profile(summary["id"])
            out.extend(self._scope_edges(record, ObjectType.CONFIGURATION_PROFILE))
        return out

    # ---------- prestages ----------
    def _computer_prestages(self) -> List[UsageEdge]:
        logger.info("Get Computer Prestages")
        out: List[UsageEdge] = []
        for record in self.jamf.get_computer_prestages():
            for package_id in record.get("customPackageIds") or []:
                package = self.jamf.get_package(package_id)
                out.append(UsageEdge(
                    type=ObjectType.COMPUTER_PRESTAGE,
                    id=record.get("id"),
                    name=record.get("displayName"),
                    usage_type=ObjectType.PACKAGE,
                    usage_id=package.get("id"),
                    usage_name=package.get("name"),
                ))
            for profile_id in record.get("prestageInstalledProfileIds") or []:
                general = self.jamf.get_configuration_profile(profile_id).get("general") or {}
                out.append(UsageEdge(
                    type=ObjectType.COMPUTER_PRESTAGE,
                    id=record.get("id"),
                    name=record.get("displayName"),
                    usage_type=ObjectType.CONFIGURATION_PROFILE,
                    usage_id=general.get("id"),
                    usage_name=general.get("name"),
                ))
        return out
