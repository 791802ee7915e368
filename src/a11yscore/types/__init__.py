"""Shared type aliases for a11yscore."""

from .common import ComplianceLevel, JsonObject, JsonScalar, JsonValue, Severity

__all__ = [
    "ComplianceLevel",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Severity",
]
