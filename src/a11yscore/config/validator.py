"""Collect-all validation for ``a11yscore.yaml`` files."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from a11yscore.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    INTERPRETATION_ALLOWED_KEYS,
    VALID_SEVERITIES,
)
from a11yscore.constants.reporting import VALID_OUTPUT_FORMATS
from a11yscore.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007
from a11yscore.exceptions.validation import ValidationError


def resolve_config_path(root: Path, config_path: Path | None = None) -> Path:
    """Explicit config path if given, else the default file under *root*."""
    return config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)


def read_config_mapping(path: Path) -> tuple[dict[str, Any] | None, list[ValidationError]]:
    """Parse a config file into a mapping, or return the errors that prevent it."""
    path_str = str(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return None, [ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}")]

    if raw is None:
        return {}, []
    if not isinstance(raw, dict):
        return None, [
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        ]
    return raw, []


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate an a11yscore.yaml file and return all validation errors.

    Never raises; a missing default config file is valid.
    """
    path = resolve_config_path(root, config_path)
    if not path.exists():
        if config_explicit:
            return [ValidationError(code=CFG001, path=str(path), field="", message=f"config file not found: {path}")]
        return []

    raw, errors = read_config_mapping(path)
    if raw is None:
        return errors
    return validate_config_mapping(raw, str(path))


def validate_config_mapping(raw: dict[str, Any], path_str: str) -> list[ValidationError]:
    """Validate an already-parsed config mapping."""
    errors: list[ValidationError] = []

    for key in sorted(str(k) for k in raw):
        if key not in CONFIG_ALLOWED_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, CONFIG_ALLOWED_KEYS),
                )
            )

    if "output_formats" in raw:
        _validate_output_formats(raw["output_formats"], path_str, errors)

    if raw.get("min_severity") is not None:
        val = raw["min_severity"]
        if not isinstance(val, str) or val not in VALID_SEVERITIES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="min_severity",
                    message="invalid value for `min_severity`",
                    hint=f"expected one of: {', '.join(sorted(VALID_SEVERITIES))}; got: {val!r}",
                )
            )

    _validate_interpretation_block(raw, path_str, errors)
    return errors


def _validate_output_formats(val: object, path_str: str, errors: list[ValidationError]) -> None:
    if not isinstance(val, list) or not all(isinstance(item, str) for item in val):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="output_formats",
                message="invalid type for `output_formats`",
                hint="expected a list of strings",
            )
        )
        return
    unknown = sorted(set(val) - VALID_OUTPUT_FORMATS)
    if unknown:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field="output_formats",
                message=f"unknown output format(s) in `output_formats`: {', '.join(unknown)}",
                hint=f"expected any of: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
            )
        )


def _validate_interpretation_block(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    block = raw.get("interpretation")
    if block is None:
        return
    if not isinstance(block, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="interpretation",
                message="`interpretation` must be a mapping",
            )
        )
        return

    for key in sorted(str(k) for k in block):
        if key not in INTERPRETATION_ALLOWED_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"interpretation.{key}",
                    message=f"unknown key `interpretation.{key}`",
                    hint=_suggest_key(key, INTERPRETATION_ALLOWED_KEYS),
                )
            )

    endpoint = block.get("endpoint")
    if endpoint is not None and (not isinstance(endpoint, str) or not endpoint.startswith(("http://", "https://"))):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="interpretation.endpoint",
                message="invalid value for `interpretation.endpoint`",
                hint="expected an http(s) URL",
            )
        )

    if "timeout_seconds" in block:
        val = block["timeout_seconds"]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="interpretation.timeout_seconds",
                    message="invalid type for `interpretation.timeout_seconds`",
                    hint="expected a positive number",
                )
            )
        elif val <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="interpretation.timeout_seconds",
                    message=f"`interpretation.timeout_seconds` must be positive, got {val}",
                )
            )

    if "max_concurrency" in block:
        val = block["max_concurrency"]
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="interpretation.max_concurrency",
                    message="invalid type for `interpretation.max_concurrency`",
                    hint="expected a positive integer",
                )
            )
        elif val <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="interpretation.max_concurrency",
                    message=f"`interpretation.max_concurrency` must be a positive integer, got {val}",
                )
            )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
