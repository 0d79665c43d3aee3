"""Pytest fixtures for casemark tests."""

import pytest
from pathlib import Path

from casemark.config import reset_settings


SETTINGS_ENV_VARS = (
    "CASEMARK_MAX_INLINE_DEPTH",
    "CASEMARK_HIGHLIGHT_PREFIX",
    "CASEMARK_LINK_SCHEMES",
    "CASEMARK_LINK_NEW_TAB",
    "CASEMARK_OUTPUT_FORMAT",
    "CASEMARK_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run every test with default settings and no stray .env file."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_markdown() -> str:
    """Sample analysis field using every block type of the dialect."""
    return """The court reviewed the **appeal** filed on ~~12 March~~ 14 March.

* The appellant is the **employer**
* The respondent is a [former employee](https://example.org/parties)

1. Procedural history
2. Facts

| Party | Role |
| :--- | ---: |
| Alpha Co. | Appellant |
| B. Smith | Respondent |

```json
{"ruling": "**upheld**"}
```

Final ruling: `upheld`."""


@pytest.fixture
def sample_json() -> str:
    """Sample analysis record as JSON."""
    return '{"title": "Case 12", "parties": [{"name": "Alpha", "role": "appellant"}], "final": true, "appealed": null, "year": 2024}'


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary dialect file for testing."""
    file_path = tmp_path / "ruling.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path


@pytest.fixture
def tmp_json_file(tmp_path: Path, sample_json: str) -> Path:
    """Create a temporary JSON file for testing."""
    file_path = tmp_path / "analysis.json"
    file_path.write_text(sample_json, encoding="utf-8")
    return file_path
