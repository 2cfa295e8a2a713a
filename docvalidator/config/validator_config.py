"""
ValidatorConfig: the configuration unit consumed by one validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True)
class ValidatorConfig:
    """Named bag of string attributes plus nested child configs.

    Attribute values are always strings; each validator parses the keys it
    recognizes and ignores the rest.
    """

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple["ValidatorConfig", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "attributes",
            MappingProxyType({str(k): str(v) for k, v in dict(self.attributes).items()}),
        )
        object.__setattr__(self, "children", tuple(self.children))

    def get_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def with_attributes(self, **attributes: Any) -> "ValidatorConfig":
        """Return a copy with ``attributes`` merged over the current ones."""
        merged = dict(self.attributes)
        merged.update({k: str(v) for k, v in attributes.items()})
        return ValidatorConfig(self.name, merged, self.children)

    def with_children(self, children: Sequence["ValidatorConfig"]) -> "ValidatorConfig":
        return ValidatorConfig(self.name, self.attributes, tuple(children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatorConfig):
            return NotImplemented
        return (
            self.name == other.name
            and dict(self.attributes) == dict(other.attributes)
            and self.children == other.children
        )

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.attributes.items())), self.children))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidatorConfig":
        """Build a config tree from ``{"name", "attributes", "children"}`` dicts."""
        return cls(
            name=data["name"],
            attributes=data.get("attributes") or {},
            children=tuple(cls.from_dict(child) for child in data.get("children") or ()),
        )
