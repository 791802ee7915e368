"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["High", "Medium", "Low"]
ComplianceLevel: TypeAlias = Literal["Excellent", "Good", "Acceptable", "Needs improvement", "Critical"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
