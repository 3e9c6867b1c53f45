"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_document():
    """Nested document touching every JSON kind."""
    return {
        "users": [
            {
                "name": "Alice",
                "email": "alice@example.com",
                "profile": {"age": 30, "city": "New York", "score": 9.5},
                "tags": ["admin", "ops"],
            },
            {
                "name": "Bob",
                "email": None,
                "profile": {},
                "tags": [],
            },
        ],
        "settings": {
            "theme": "dark",
            "notifications": True,
            "beta": False,
        },
        "content-type": "application/json",
        "a.b": 1,
        "": "empty key",
        "unicode": "café ☃",
        "escapes": "line\nbreak \"quoted\" \\ tab\t",
    }


@pytest.fixture
def sample_statements():
    """Sorted gron output for a small document."""
    return "\n".join([
        'json = {};',
        'json.company = {};',
        'json.company.name = "Initech";',
        'json.id = 1;',
        'json.tags = [];',
        'json.tags[0] = "x";',
        'json.tags[1] = null;',
        '',
    ])
