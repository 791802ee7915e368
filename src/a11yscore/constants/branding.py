"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "A11YSCORE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ A11YSCORE",
    "     // accessibility scoring for web pages",
)
SCAN_SUMMARY_TITLE: str = "Accessibility report"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} report builder"))
