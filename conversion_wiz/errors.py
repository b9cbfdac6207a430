"""Conversion error taxonomy reported verbatim to callers.

Example:
    >>> from conversion_wiz.errors import UnknownUnitError
    >>> err = UnknownUnitError("Furlong")
    >>> err.error_code
    'UNIT_001'
    >>> str(err)
    "Cannot find unit 'Furlong'."
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ConversionError(Exception):
    """Base conversion_wiz error.

    Attributes:
        error_code: Stable error identifier.
        kind: One of unknown_unit/duplicate_unit/no_path/invalid_configuration.
        message: Human-readable description, safe to show to end users.
        details: Offending names, unit pairs or config locations.

    Example:
        >>> err = ConversionError("X_001", "example", "Something broke.")
        >>> err.to_dict()["kind"]
        'example'
    """

    error_code: str
    kind: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return serializable error details."""
        return {
            "error_code": self.error_code,
            "kind": self.kind,
            "message": self.message,
            "details": dict(self.details),
        }

    def to_payload(self) -> str:
        """Serialize the error as deterministic JSON.

        Example:
            >>> payload = UnknownUnitError("x").to_payload()
            >>> '"error_code": "UNIT_001"' in payload
            True
        """
        return json.dumps(self.to_dict(), sort_keys=True, indent=2)


class UnknownUnitError(ConversionError):
    """Raised when a name or alias does not resolve to any registered unit."""

    def __init__(self, name: str):
        super().__init__(
            error_code="UNIT_001",
            kind="unknown_unit",
            message=f"Cannot find unit '{name}'.",
            details={"name": name},
        )
        self.name = name


class DuplicateUnitError(ConversionError):
    """Raised when a name or alias is claimed by two different units."""

    def __init__(self, name: str, existing_unit: str, new_unit: str):
        if existing_unit == new_unit:
            message = f"Unit '{new_unit}' declares '{name}' more than once."
        else:
            message = (
                f"Name '{name}' of unit '{new_unit}' is already used by unit "
                f"'{existing_unit}'."
            )
        super().__init__(
            error_code="UNIT_002",
            kind="duplicate_unit",
            message=message,
            details={"name": name, "existing_unit": existing_unit, "new_unit": new_unit},
        )
        self.name = name


class NoPathFoundError(ConversionError):
    """Raised when two known units are not connected by any directed path."""

    def __init__(self, source: str, target: str):
        super().__init__(
            error_code="PATH_001",
            kind="no_path",
            message=f"No conversion path found from '{source}' to '{target}'.",
            details={"source": source, "target": target},
        )
        self.source = source
        self.target = target


class InvalidConfigurationError(ConversionError):
    """Raised when configuration input is malformed or semantically invalid."""

    def __init__(self, reason: str, location: str = "<root>"):
        super().__init__(
            error_code="CFG_001",
            kind="invalid_configuration",
            message=f"Invalid configuration at {location}: {reason}",
            details={"location": location, "reason": reason},
        )
        self.location = location
        self.reason = reason
