"""Stable validation error codes for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG010: str = "CFG010"  # root directory not found
