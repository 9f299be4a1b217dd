"""Shared pytest fixtures for documents and importable validator modules."""

from __future__ import annotations

import json
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

VALIDATORS_SOURCE = textwrap.dedent(
    """
    from vouch import IS_INTEGER, IS_MAP, REQUIRED, validate_key, validate_string_length

    user = validate_key("id", REQUIRED, IS_INTEGER)
    user = validate_key("name", REQUIRED, validate_string_length(min=1), base=user)

    NOT_CALLABLE = 42


    class Schemas:
        map = IS_MAP
    """
)


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, object], Path]:
    """Return a helper that writes a JSON or YAML document under ``tmp_path``."""

    def _write(name: str, payload: object) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix == ".json":
            path.write_text(json.dumps(payload), encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def validators_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Create an importable module of sample validators and return its name."""
    package_dir = tmp_path / "modules"
    package_dir.mkdir()
    module_name = f"sample_validators_{tmp_path.name.replace('-', '_')}"
    (package_dir / f"{module_name}.py").write_text(VALIDATORS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(package_dir))
    return module_name
