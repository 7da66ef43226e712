"""Root test configuration: isolate tests from a developer's docstore settings"""

import pytest


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """Drop DOCSTORE_* variables so tests see Settings defaults unless they set their own."""
    for name in ("DOCSTORE_APP_NAME", "DOCSTORE_STORAGE_URL", "DOCSTORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
