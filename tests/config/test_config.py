from __future__ import annotations

import logging
from pathlib import Path

import pytest

from airac_updater.common.progress import TRACE
from airac_updater.config import (
    ConfigurationError,
    get_catalog_config,
    get_reconciliation_config,
    get_storage_config,
    parse_log_level,
)
from airac_updater.config.catalog import DEFAULT_DATASETS, DFS_CATALOG_URL

ENV_VARS = (
    "AIRAC_UPDATER_CATALOG_URL",
    "AIRAC_UPDATER_AMENDMENT",
    "AIRAC_UPDATER_RELEASE_TYPE",
    "AIRAC_UPDATER_DATASETS",
    "AIRAC_UPDATER_HTTP_CACHE",
    "AIRAC_UPDATER_FIX_RADIUS_M",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_catalog_defaults() -> None:
    config = get_catalog_config()

    assert config.catalog_url == DFS_CATALOG_URL
    assert config.base_url == "https://aip.dfs.de/datasets/rest"
    assert config.amendment_id == 0
    assert config.release_type == "AIXM 5.1"
    assert config.datasets == DEFAULT_DATASETS
    assert config.resilience.cache is not None
    assert config.resilience.cache.backend == "memory"


def test_catalog_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AIRAC_UPDATER_AMENDMENT", "3")
    monkeypatch.setenv("AIRAC_UPDATER_DATASETS", "ED Navaids, ED Waypoints,")
    monkeypatch.setenv("AIRAC_UPDATER_HTTP_CACHE", "off")

    config = get_catalog_config()

    assert config.amendment_id == 3
    assert config.datasets == ("ED Navaids", "ED Waypoints")
    assert config.resilience.cache is not None
    assert not config.resilience.cache.enabled


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("AIRAC_UPDATER_AMENDMENT", "latest"),
        ("AIRAC_UPDATER_AMENDMENT", "-1"),
        ("AIRAC_UPDATER_HTTP_CACHE", "redis"),
        ("AIRAC_UPDATER_DATASETS", " , "),
    ],
)
def test_invalid_catalog_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError) as exc:
        get_catalog_config()

    assert name in str(exc.value)


def test_reconciliation_radius(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_reconciliation_config().fix_match_radius_m == 1000.0

    monkeypatch.setenv("AIRAC_UPDATER_FIX_RADIUS_M", "250")
    assert get_reconciliation_config().fix_match_radius_m == 250.0

    monkeypatch.setenv("AIRAC_UPDATER_FIX_RADIUS_M", "0")
    with pytest.raises(ConfigurationError):
        get_reconciliation_config()


def test_storage_dir_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("AIRAC_UPDATER_DATA_DIR", str(tmp_path / "data"))

    cache_path = get_storage_config().http_cache_path()

    assert cache_path == (tmp_path / "data" / "http_cache.db").resolve()
    assert cache_path.parent.is_dir()


@pytest.mark.parametrize(
    ("value", "level"),
    [("trace", TRACE), ("DEBUG", logging.DEBUG), ("warn", logging.WARNING), ("error", 40)],
)
def test_parse_log_level(value: str, level: int) -> None:
    assert parse_log_level(value) == level


def test_parse_log_level_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        parse_log_level("loud")
