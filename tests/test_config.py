"""Loading JSON configuration into kernel parameters."""

from __future__ import annotations

import json

import pytest

from microkernel import Kernel
from microkernel.config import ConfigLoader, build_default_config
from microkernel.kernel.errors import ConfigError


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "app.json"
    path.write_text(
        json.dumps({"app": "demo", "log": {"level": "DEBUG"}, "db": {"dsn": "sqlite://"}}),
        encoding="utf-8",
    )
    return path


def test_defaults_fill_missing_keys(config_file):
    loader = ConfigLoader(config_file, defaults=build_default_config())
    config = loader.load()

    assert config["app"] == "demo"
    assert config["debug"] is False
    assert loader.get("log.level") == "DEBUG"
    assert loader.get("log.file") is None
    assert loader.get("db.dsn") == "sqlite://"


def test_get_missing_key_returns_default(config_file):
    loader = ConfigLoader(config_file)
    loader.load()

    assert loader.get("db.user", "root") == "root"
    assert loader.get("app.name", "x") == "x"


def test_load_without_path_uses_defaults():
    loader = ConfigLoader(defaults={"a": {"b": 1}})

    assert loader.load() == {"a": {"b": 1}}


def test_defaults_are_not_shared_between_loads():
    defaults = {"a": {"b": 1}}
    loader = ConfigLoader(defaults=defaults)
    loader.load()["a"]["b"] = 2

    assert defaults == {"a": {"b": 1}}


def test_apply_top_level_keys(config_file):
    kernel = Kernel()
    loader = ConfigLoader(config_file)
    loader.load()

    written = loader.apply_to(kernel)

    assert written == ["app", "log", "db"]
    assert kernel.get_parameter("log") == {"level": "DEBUG"}


def test_apply_flattened_keys(config_file):
    kernel = Kernel()
    loader = ConfigLoader(config_file, defaults={"empty": {}})
    loader.load()

    loader.apply_to(kernel, flatten=True)

    assert kernel.get_parameter("log.level") == "DEBUG"
    assert kernel.get_parameter("db.dsn") == "sqlite://"
    assert kernel.get_parameter("empty") == {}
    assert not kernel.has_parameter("log")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(tmp_path / "missing.json").load()


def test_invalid_json_raises_config_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigLoader(path).load()


def test_non_object_top_level_raises(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigLoader(path).load()


def test_invalid_utf8_raises_config_error(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"app": "\xff\xfe"}')

    with pytest.raises(ConfigError):
        ConfigLoader(path).load()


def test_unreadable_path_raises_config_error(tmp_path):
    with pytest.raises(ConfigError):
        ConfigLoader(tmp_path).load()
