"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

DEPENDABOT_COMPLETE = """\
version: 2
updates:
  - directory: /
    package-ecosystem: cargo
    schedule:
      interval: daily
  - directory: /
    package-ecosystem: gitsubmodule
    schedule:
      interval: daily
  - directory: /
    package-ecosystem: github-actions
    schedule:
      interval: daily
"""

CI_WORKFLOW = """\
name: CI
on: [push, pull_request]
jobs:
  test:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - name: Run tests
        run: cargo test
"""


def write_files(root: Path, files: dict[str, str]) -> Path:
    """Create files (with parent directories) under root."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def dependabot_complete():
    """Dependabot config declaring cargo, gitsubmodule and github-actions."""
    return DEPENDABOT_COMPLETE


@pytest.fixture
def complete_project(tmp_path):
    """Project whose ecosystems are all covered by Dependabot."""
    return write_files(tmp_path, {
        "Cargo.toml": '[package]\nname = "test-project"\nversion = "0.1.0"\n',
        ".gitmodules": '[submodule "external"]\n\tpath = external\n',
        ".github/dependabot.yaml": DEPENDABOT_COMPLETE,
        ".github/workflows/ci.yml": CI_WORKFLOW,
    })


@pytest.fixture
def incomplete_project(tmp_path):
    """Project with Cargo and npm manifests and no Dependabot config."""
    return write_files(tmp_path, {
        "Cargo.toml": '[package]\nname = "test-project"\n',
        "package.json": '{"name": "test-project", "dependencies": {"lodash": "^4.17.21"}}\n',
    })


@pytest.fixture
def make_tree(tmp_path):
    """Factory writing a {relative path: content} mapping under tmp_path."""
    def _make_tree(files: dict[str, str]) -> Path:
        return write_files(tmp_path, files)

    return _make_tree
