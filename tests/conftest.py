import json
import os
import tempfile

import pytest

from review_assigner import Person


class IdentityRng:
    """Random source that makes Fisher-Yates keep the original order."""

    def randint(self, a, b):
        return b


@pytest.fixture
def identity_rng():
    return IdentityRng()


@pytest.fixture
def team():
    return [
        Person("Alice", "E1"),
        Person("Bob", "E2"),
        Person("Charlie", "E3"),
        Person("Dana", "E4"),
        Person("Eve", "E5"),
    ]


@pytest.fixture
def pool_a():
    return [
        Person("Alice", "A1"),
        Person("Bob", "A2"),
        Person("Charlie", "A3"),
    ]


@pytest.fixture
def pool_b():
    return [
        Person("Dana", "B1"),
    ]


@pytest.fixture
def single_pool_content():
    return {
        "people": [
            {"name": "Alice", "employeeId": "E1"},
            {"name": "Bob", "employeeId": "E2"},
            {"name": "Charlie", "employeeId": "E3"},
            {"name": "Dana", "employeeId": "E4"},
        ]
    }


@pytest.fixture
def dual_pool_content():
    return {
        "poolA": {
            "people": [
                {"name": "Alice", "employeeId": "A1"},
                {"name": "Bob", "employeeId": "A2"},
                {"name": "Charlie", "employeeId": "A3"},
            ]
        },
        "poolB": {
            "people": [
                {"name": "张伟", "employeeId": "B1"},
                {"name": "Eve", "employeeId": "B2"},
            ]
        },
    }


@pytest.fixture
def temp_single_pool(single_pool_content):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8') as f:
        json.dump(single_pool_content, f)
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def temp_dual_pool(dual_pool_content):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8') as f:
        json.dump(dual_pool_content, f, ensure_ascii=False)
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep config discovery away from the developer's real home directory."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
