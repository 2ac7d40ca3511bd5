"""Shared test fixtures for thankful."""

import os
import tempfile

import pytest

from thankful.core.storage import MemorySlot
from thankful.journal import EntryStore, FixedClock, GratitudeJournal


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
        },
        "insights": {
            "frequent_entries_limit": 3,
            "frequent_words_limit": 4,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def slot():
    return MemorySlot()


@pytest.fixture
def store(slot):
    return EntryStore(slot)


@pytest.fixture
def sample_entries():
    return {
        "2025-01-01": ["Warm coffee on a cold morning", "A call from an old friend, out of the blue"],
        "2025-01-02": ["Coffee with Sam"],
        "2025-01-03": ["Sunny walk in the park", "coffee"],
    }


@pytest.fixture
def journal(slot):
    """A journal on in-memory storage where today is 2025-01-04."""
    return GratitudeJournal(slot, clock=FixedClock("2025-01-04"))
