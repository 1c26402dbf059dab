import pytest
import yaml
from omegaconf import OmegaConf

from rps_gesture.utils.config import DEFAULT_CONFIG_DIR, ConfigManager


def test_packaged_classifier_config():
    config = ConfigManager().load_config("classifier")
    assert config.classifier.missing_joints == "origin"
    assert config.classifier.log_finger_states is True
    assert config.logging.file_output is False


def test_packaged_config_matches_defaults():
    manager = ConfigManager()
    loaded = OmegaConf.to_container(manager.load_config("classifier"))
    assert loaded == manager.get_default_config("classifier")


def test_default_dir_is_packaged():
    assert ConfigManager().config_dir == DEFAULT_CONFIG_DIR
    assert (DEFAULT_CONFIG_DIR / "classifier.yaml").exists()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path)).load_config("classifier")


def test_invalid_yaml(tmp_path):
    (tmp_path / "broken.yaml").write_text("classifier: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        ConfigManager(str(tmp_path)).load_config("broken")


def test_get_config_before_load():
    with pytest.raises(KeyError):
        ConfigManager().get_config("classifier")


def test_save_and_reload(tmp_path):
    manager = ConfigManager(str(tmp_path))
    manager.save_config({"classifier": {"missing_joints": "unknown"}}, "custom")
    assert manager.load_config("custom").classifier.missing_joints == "unknown"


def test_merge_configs(tmp_path):
    manager = ConfigManager(str(tmp_path))
    manager.save_config(manager.get_default_config("classifier"), "base")
    manager.save_config({"classifier": {"missing_joints": "unknown"}}, "override")
    manager.load_config("base")
    manager.load_config("override")

    merged = manager.merge_configs("base", "override")
    assert merged.classifier.missing_joints == "unknown"
    assert merged.classifier.log_finger_states is True


def test_load_or_default_fills_gaps(tmp_path):
    (tmp_path / "classifier.yaml").write_text("classifier:\n  log_finger_states: false\n")
    config = ConfigManager(str(tmp_path)).load_or_default("classifier")
    assert config.classifier.log_finger_states is False
    assert config.classifier.missing_joints == "origin"
    assert config.logging.level == "INFO"


def test_load_or_default_without_file(tmp_path):
    manager = ConfigManager(str(tmp_path))
    config = manager.load_or_default("classifier")
    assert config.classifier.missing_joints == "origin"
    assert manager.get_config("classifier") is config


def test_validate_config():
    manager = ConfigManager()
    config = manager.load_config("classifier")
    schema = {"classifier": {"missing_joints": None}, "logging": {}}
    assert manager.validate_config(config, schema)
    assert not manager.validate_config(config, {"camera": {}})
    assert not manager.validate_config({"classifier": "origin"}, {"classifier": {"missing_joints": None}})


def test_unknown_default_type():
    assert ConfigManager().get_default_config("training") == {}


def test_load_with_defaults_any_name(tmp_path):
    (tmp_path / "strict.yaml").write_text("classifier:\n  missing_joints: unknown\n")
    manager = ConfigManager(str(tmp_path))
    config = manager.load_with_defaults("strict", "classifier")
    assert config.classifier.missing_joints == "unknown"
    assert config.classifier.log_finger_states is True
    assert config.logging.level == "INFO"
    assert manager.get_config("strict") is config


def test_load_with_defaults_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path)).load_with_defaults("nope", "classifier")
