"""Tests for ConfigHolder — publication of the loaded config and its path."""

import json
import os
import threading
from pathlib import Path

import pytest

from mosn_config.config.application.holder import ConfigHolder
from mosn_config.config.infrastructure.errors import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigNotLoadedError,
)
from mosn_config.config.infrastructure.json_loader import JsonConfigLoader
from tests.config.fake_observer import FakeConfigObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _holder() -> ConfigHolder:
    return ConfigHolder(loader=JsonConfigLoader(observer=FakeConfigObserver()))


def _write_config(path: Path, servers: int) -> Path:
    doc = {"servers": [{"processor": index} for index in range(servers)]}
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


class TestUnloadedHolder:
    def test_is_not_loaded(self) -> None:
        assert _holder().is_loaded is False

    def test_reading_config_raises(self) -> None:
        with pytest.raises(ConfigNotLoadedError):
            _ = _holder().config

    def test_reading_path_raises(self) -> None:
        with pytest.raises(ConfigNotLoadedError):
            _ = _holder().path

    def test_dump_raises(self) -> None:
        with pytest.raises(ConfigNotLoadedError):
            _holder().dump()


class TestLoad:
    def test_load_publishes_config(self) -> None:
        holder = _holder()
        cfg = holder.load(FIXTURES / "valid_config.json")

        assert holder.is_loaded is True
        assert holder.config is cfg

    def test_relative_path_is_recorded_as_absolute(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(FIXTURES)
        holder = _holder()

        holder.load(Path("valid_config.json"))

        assert holder.path.is_absolute()
        assert holder.path == Path(os.path.abspath(FIXTURES / "valid_config.json"))

    def test_dotted_path_is_normalised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(FIXTURES)
        holder = _holder()

        holder.load(Path("../fixtures/./empty_config.json"))

        assert holder.path == Path(os.path.abspath(FIXTURES / "empty_config.json"))

    def test_published_pairs_config_with_path(self, tmp_path: Path) -> None:
        holder = _holder()
        path = _write_config(tmp_path / "a.json", servers=2)

        holder.load(path)

        assert len(holder.published.config.servers) == 2
        assert holder.published.path == path


class TestFailedLoad:
    """A failed load publishes nothing and keeps any previous config."""

    def test_failed_first_load_stays_unloaded(self) -> None:
        holder = _holder()
        with pytest.raises(ConfigDecodeError):
            holder.load(FIXTURES / "invalid_duration.json")

        assert holder.is_loaded is False

    def test_failed_reload_keeps_previous(self, tmp_path: Path) -> None:
        holder = _holder()
        good = _write_config(tmp_path / "good.json", servers=1)
        holder.load(good)

        with pytest.raises(ConfigLoadError):
            holder.load(tmp_path / "missing.json")

        assert holder.path == good
        assert len(holder.config.servers) == 1


class TestReload:
    def test_reload_replaces_config_and_path(self, tmp_path: Path) -> None:
        holder = _holder()
        first = _write_config(tmp_path / "first.json", servers=1)
        second = _write_config(tmp_path / "second.json", servers=3)

        holder.load(first)
        holder.load(second)

        assert holder.path == second
        assert len(holder.config.servers) == 3

    def test_concurrent_readers_see_consistent_snapshots(self, tmp_path: Path) -> None:
        holder = _holder()
        expected = {
            _write_config(tmp_path / "one.json", servers=1): 1,
            _write_config(tmp_path / "four.json", servers=4): 4,
        }
        paths = list(expected)
        holder.load(paths[0])

        mismatches: list[str] = []
        stop = threading.Event()

        def _read() -> None:
            while not stop.is_set():
                snapshot = holder.published
                if len(snapshot.config.servers) != expected[snapshot.path]:
                    mismatches.append(str(snapshot.path))

        readers = [threading.Thread(target=_read) for _ in range(4)]
        for reader in readers:
            reader.start()
        for index in range(50):
            holder.load(paths[index % 2])
        stop.set()
        for reader in readers:
            reader.join()

        assert mismatches == []


class TestDump:
    def test_dump_reserialises_published_config(self) -> None:
        holder = _holder()
        cfg = holder.load(FIXTURES / "valid_config.json")

        dumped = holder.dump()

        assert json.loads(dumped)["cluster_manager"]["clusters"][0]["name"] == (
            cfg.cluster_manager.clusters[0].name
        )

    def test_dump_keeps_raw_resources_verbatim(self) -> None:
        holder = _holder()
        holder.load(FIXTURES / "valid_config.json")

        dumped = holder.dump(indent=None)

        assert '"dynamic_resources":{"a": {"b": [1, 2, 3]}}' in dumped
