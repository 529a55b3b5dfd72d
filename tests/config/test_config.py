import codecs
import json

import pytest
from pydantic import ValidationError

from create_ignite.config import Config, ConfigLoader, UIAdapter, get_config, loader

test_config_data = {
    "log": {"level": "DEBUG", "output": "ignite.log"},
    "ui": {"type": "virtual", "inputs": [{"text": "my-app"}, {"button": "frontend"}]},
    "cache": {"enabled": False, "path": "/tmp/ignite.json"},
    "install": {"max_retries": 5, "retry_delay": 0.5, "timeout": 120},
    "node": {"check": False, "min_version": "18.17.0"},
}


def test_parse_config():
    config = ConfigLoader.from_json(json.dumps(test_config_data))

    assert config.log.level == "DEBUG"
    assert config.log.output == "ignite.log"
    assert config.ui.type == UIAdapter.VIRTUAL
    assert config.ui.inputs[1] == {"button": "frontend"}
    assert config.cache.enabled is False
    assert config.cache.path == "/tmp/ignite.json"
    assert config.install.max_retries == 5
    assert config.install.retry_delay == 0.5
    assert config.node.check is False
    assert config.node.min_version_info == (18, 17, 0)


def test_builtin_defaults():
    config = ConfigLoader.from_json("{}")

    assert config.ui.type == UIAdapter.PLAIN
    assert config.cache.enabled is True
    assert config.cache.path.endswith(".ignite-config.json")
    assert config.install.max_retries == 3
    assert config.install.retry_delay == 2.0
    assert config.install.timeout == 600.0
    assert config.node.check is True
    assert config.node.min_version_info == (16, 0, 0)


@pytest.mark.parametrize(
    "data",
    [
        {"log": {"level": "VERBOSE"}},
        {"ui": {"type": "web"}},
        {"install": {"max_retries": 0}},
        {"node": {"min_version": "16"}},
        {"unknown": True},
    ],
)
def test_invalid_config(data):
    with pytest.raises(ValidationError):
        ConfigLoader.from_json(json.dumps(data))


def test_load_from_file_with_comments(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        '{\n  // no cache for CI runs\n  "cache": {"enabled": false}\n}\n',
        encoding="utf-8",
    )

    cfg_loader = ConfigLoader()
    config = cfg_loader.load(str(config_path))

    assert config.cache.enabled is False
    assert cfg_loader.config_path == str(config_path)


def test_default_config():
    loader.config = Config()
    config = get_config()
    assert config.log.level == "INFO"
    assert config.ui.type == UIAdapter.PLAIN


@pytest.mark.parametrize(
    ("encoding", "bom"),
    [
        ("utf-8", None),
        ("utf-16", None),
        ("utf-16-le", codecs.BOM_UTF16_LE),
        ("utf-16-be", codecs.BOM_UTF16_BE),
    ],
)
def test_encodings(encoding, bom, tmp_path):
    data = json.dumps(test_config_data)
    config_path = tmp_path / "config.json"
    with open(config_path, "wb") as f:
        if bom:
            f.write(bom)
        f.write(data.encode(encoding))

    config = ConfigLoader().load(str(config_path))
    assert config.install.max_retries == 5
