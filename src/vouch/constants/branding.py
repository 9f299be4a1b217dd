"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "vouch"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: validate YAML and JSON documents with composable validators"

OK_LABEL: str = "OK"
FAIL_LABEL: str = "FAIL"
