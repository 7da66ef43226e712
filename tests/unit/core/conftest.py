"""Shared fixtures for core unit tests"""

import pytest


DOCS_YAML = """\
documents:
  - id: alpha
    title: Alpha report
    content: Quarterly budget for alpha
    author: {id: a1, name: Ann}
    created: 2024-01-10T09:00:00Z
  - id: beta
    title: Beta notes
    content: Meeting notes
    author: {id: a2, name: Bob}
    created: 2024-02-10T09:00:00Z
  - title: Gamma draft
    content: Budget draft
"""


@pytest.fixture(name="docs_file")
def docs_file_fixture(tmp_path):
    """A YAML document batch with two identified documents and one without an id."""
    path = tmp_path / "docs.yaml"
    path.write_text(DOCS_YAML)
    return path
