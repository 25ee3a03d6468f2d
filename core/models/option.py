"""OptionsGroup StoredOption Domain Model - One persisted option group.

A StoredOption is the row a store keeps for a group: the group name, its
mapping of values, the autoload flag and the time it was last written.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..exceptions import ValidationError
from ..types import GroupName, OptionMapping


@dataclass(frozen=True)
class StoredOption:
    """Domain model representing a persisted option group.

    Attributes:
        name: Group name, the key into the store
        value: Mapping of option keys to option values
        autoload: Whether the host should preload this group on start-up
        updated_at: When the row was last written
    """

    name: GroupName
    value: OptionMapping = field(default_factory=dict)
    autoload: bool = True
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate model after initialization."""
        if not self.name or not self.name.strip():
            raise ValidationError("name", self.name, "Group name cannot be empty")
        if not isinstance(self.value, dict):
            raise ValidationError("value", self.value, "Group value must be a mapping")

    @property
    def is_empty(self) -> bool:
        """Check whether the group holds no options."""
        return not self.value

    def encoded_value(self) -> str:
        """Return the value serialized the way stores write it."""
        return json.dumps(self.value, sort_keys=True, default=str)

    @classmethod
    def from_row(
        cls,
        name: str,
        raw_value: Optional[str],
        autoload: Optional[bool] = True,
        updated_at: Optional[datetime] = None,
    ) -> "StoredOption":
        """Create a StoredOption from a store row holding JSON text.

        Text that does not decode to a mapping yields an empty value.
        """
        value: Dict[str, Any] = {}
        if raw_value:
            try:
                decoded = json.loads(raw_value)
            except (json.JSONDecodeError, TypeError):
                decoded = None
            if isinstance(decoded, dict):
                value = decoded

        return cls(
            name=GroupName(name),
            value=value,
            autoload=bool(autoload) if autoload is not None else True,
            updated_at=updated_at,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoredOption":
        """Create a StoredOption from a dictionary.

        Raises:
            ValidationError: If required fields are missing or invalid
        """
        name = data.get("name")
        if not name:
            raise ValidationError("name", name, "Group name is required")

        updated_at = data.get("updated_at")
        if isinstance(updated_at, str):
            updated_at = datetime.fromisoformat(updated_at)

        return cls(
            name=GroupName(name),
            value=data.get("value") or {},
            autoload=bool(data.get("autoload", True)),
            updated_at=updated_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary representation."""
        return {
            "name": self.name,
            "value": self.value,
            "autoload": self.autoload,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __str__(self) -> str:
        return f"StoredOption({self.name}, {len(self.value)} keys)"
