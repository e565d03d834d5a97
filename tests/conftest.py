from pathlib import Path

import pytest

from tests.infrastructure import write


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """
    Directory layout used by loader and CLI tests.

        root/
        ├── primary/
        │   ├── index.html
        │   └── mail/welcome.txt
        ├── fallback/
        │   ├── index.html
        │   └── only-here.html
        └── webapp/
            └── WEB-INF/templates/page.ftl
    """
    root = tmp_path
    write(root / "primary" / "index.html", "primary index")
    write(root / "primary" / "mail" / "welcome.txt", "welcome")
    write(root / "fallback" / "index.html", "fallback index")
    write(root / "fallback" / "only-here.html", "only in fallback")
    write(root / "webapp" / "WEB-INF" / "templates" / "page.ftl", "webapp page")
    return root
