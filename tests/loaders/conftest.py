"""
Fixtures for loader tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.infrastructure import write

RESOURCE_PACKAGE = "tplpath_fixture_pkg"


@pytest.fixture
def resource_package(tmp_path: Path, monkeypatch) -> str:
    """
    Importable package with packaged templates.

        tplpath_fixture_pkg/
        ├── __init__.py
        └── templates/
            ├── hello.txt
            └── nested/deep.txt
    """
    pkg_root = tmp_path / "site"
    pkg = pkg_root / RESOURCE_PACKAGE
    write(pkg / "__init__.py", "")
    write(pkg / "templates" / "hello.txt", "hello from package")
    write(pkg / "templates" / "nested" / "deep.txt", "deep")
    monkeypatch.syspath_prepend(str(pkg_root))
    monkeypatch.delitem(sys.modules, RESOURCE_PACKAGE, raising=False)
    return RESOURCE_PACKAGE
