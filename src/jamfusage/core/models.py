from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union


class ObjectType(str, Enum):
    CATEGORY = "category"
    COMPUTER_GROUP = "computer_group"
    POLICY = "policy"
    CONFIGURATION_PROFILE = "configuration_profile"
    EXTENSION_ATTRIBUTE = "extension_attribute"
    PACKAGE = "package"
    SCRIPT = "script"
    ADVANCED_COMPUTER_SEARCH = "advanced_computer_search"
    COMPUTER_PRESTAGE = "computer_prestage"


# Column template shared by every catalog row
OBJECT_FIELDS = (
    "type", "id", "name", "is_smart", "category", "enabled",
    "scope_targets", "scope_limitations", "scope_exclusions",
)

USAGE_FIELDS = (
    "type", "id", "name", "category", "enabled",
    "usage_type", "usage_location", "usage_id", "usage_name",
)


class _CatalogEntry:
    type: ClassVar[ObjectType]

    def to_row(self) -> Dict[str, Any]:
        """Template row: every OBJECT_FIELDS key present, inapplicable ones None."""
        row: Dict[str, Any] = dict.fromkeys(OBJECT_FIELDS)
        row["type"] = self.type.value
        for f in fields(self):
            row[f.name] = getattr(self, f.name)
        return row


@dataclass(frozen=True)
class Category(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.CATEGORY
    id: Any
    name: Optional[str] = None
    priority: Optional[int] = None

@dataclass(frozen=True)
class ComputerGroup(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.COMPUTER_GROUP
    id: Any
    name: Optional[str] = None
    is_smart: Optional[bool] = None

@dataclass(frozen=True)
class Policy(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.POLICY
    id: Any
    name: Optional[str] = None
    category: Optional[str] = None
    enabled: Optional[bool] = None
    scope_targets: Optional[str] = None
    scope_limitations: Optional[str] = None
    scope_exclusions: Optional[str] = None

@dataclass(frozen=True)
class ConfigurationProfile(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.CONFIGURATION_PROFILE
    id: Any
    name: Optional[str] = None
    category: Optional[str] = None
    scope_targets: Optional[str] = None
    scope_limitations: Optional[str] = None
    scope_exclusions: Optional[str] = None

@dataclass(frozen=True)
class ExtensionAttribute(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.EXTENSION_ATTRIBUTE
    id: Any
    name: Optional[str] = None
    enabled: Optional[bool] = None

@dataclass(frozen=True)
class Package(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.PACKAGE
    id: Any
    name: Optional[str] = None
    category: Optional[str] = None

@dataclass(frozen=True)
class Script(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.SCRIPT
    id: Any
    name: Optional[str] = None
    category: Optional[str] = None

@dataclass(frozen=True)
class AdvancedComputerSearch(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.ADVANCED_COMPUTER_SEARCH
    id: Any
    name: Optional[str] = None

@dataclass(frozen=True)
class ComputerPrestage(_CatalogEntry):
    type: ClassVar[ObjectType] = ObjectType.COMPUTER_PRESTAGE
    id: Any
    name: Optional[str] = None


ConfigObject = Union[
    Category, ComputerGroup, Policy, ConfigurationProfile, ExtensionAttribute,
    Package, Script, AdvancedComputerSearch, ComputerPrestage,
]


@dataclass(frozen=True)
class UsageEdge:
    """One reference from a source object to the object it uses."""
    type: ObjectType
    id: Any
    name: Optional[str]
    usage_type: ObjectType
    usage_location: Optional[str] = None
    usage_id: Any = None
    usage_name: Optional[str] = None
    category: Optional[str] = None
    enabled: Optional[bool] = None

    def to_row(self) -> Dict[str, Any]:
        row = {k: getattr(self, k) for k in USAGE_FIELDS}
        row["type"] = self.type.value
        row["usage_type"] = self.usage_type.value
        return row
