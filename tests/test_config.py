import os
import pytest
import yaml
from pathlib import Path
from volorch.config import VolorchConfig, get_volorch_home, load_config
from volorch.errors import ConfigError


def test_get_volorch_home_default(monkeypatch):
    monkeypatch.delenv("VOLORCH_HOME", raising=False)
    home = get_volorch_home()
    assert home == Path("~/.config/volorch").expanduser()


def test_get_volorch_home_env_var(monkeypatch, tmp_path):
    custom_home = tmp_path / "custom_home"
    monkeypatch.setenv("VOLORCH_HOME", str(custom_home))
    assert get_volorch_home() == custom_home


def test_load_config_missing_file(monkeypatch, tmp_path):
    monkeypatch.setenv("VOLORCH_HOME", str(tmp_path))
    with pytest.raises(FileNotFoundError, match="volorch config.yaml not found"):
        load_config()


def test_load_config_valid(monkeypatch, tmp_path):
    monkeypatch.setenv("VOLORCH_HOME", str(tmp_path))
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({
        "default_engine": "jiva",
        "log_level": "debug",
        "log_format": "structured",
        "output_format": "yaml",
    }))

    cfg = load_config()
    assert isinstance(cfg, VolorchConfig)
    assert cfg.log_level == "debug"
    assert cfg.log_format == "structured"
    assert cfg.output_format == "yaml"


def test_load_config_explicit_path(tmp_path):
    config_path = tmp_path / "elsewhere.yaml"
    config_path.write_text(yaml.dump({"output_format": "yaml"}))
    assert load_config(config_path).output_format == "yaml"


def test_load_config_empty_file_uses_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("")
    assert load_config(config_path) == VolorchConfig()


def test_load_config_invalid_yaml(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("log_level: [unclosed")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(config_path)


def test_load_config_not_a_mapping(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(config_path)


def test_load_config_unknown_key(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"project": "x"}))
    with pytest.raises(ConfigError, match="Unknown config keys"):
        load_config(config_path)


@pytest.mark.parametrize("key,value", [
    ("log_level", "LOUD"),
    ("log_format", "xml"),
    ("output_format", "toml"),
    ("default_engine", ""),
])
def test_load_config_invalid_values(tmp_path, key, value):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({key: value}))
    with pytest.raises(ConfigError):
        load_config(config_path)


def test_load_config_with_env_file(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    env_file = tmp_path / ".env.test"
    env_file.write_text("VOLORCH_TEST_VAR=loaded_from_env")
    config_path.write_text(yaml.dump({"env_file": str(env_file)}))

    # Pre-clean env var
    monkeypatch.delenv("VOLORCH_TEST_VAR", raising=False)

    load_config(config_path)
    assert os.environ.get("VOLORCH_TEST_VAR") == "loaded_from_env"
    monkeypatch.delenv("VOLORCH_TEST_VAR", raising=False)
