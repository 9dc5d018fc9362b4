"""Shared fixtures for disk-stats tests."""

import pytest

MB = 1024 * 1024


def make_tree(base, relative_dirs):
    """Create directories under base and return the resolved base path."""
    base = base.resolve()
    base.mkdir(parents=True, exist_ok=True)
    for rel in relative_dirs:
        (base / rel).mkdir(parents=True, exist_ok=True)
    return base


class FakeProbe:
    """Size probe backed by a dict of absolute path -> bytes."""

    def __init__(self, sizes):
        self.sizes = {str(k): v for k, v in sizes.items()}
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        return self.sizes.get(path, 0)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temporary location."""
    from disk_stats import config

    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setattr(config, "CONFIG_FILE", config_file)
    return config_file
