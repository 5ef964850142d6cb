import pytest

from core.config import DEFAULT_AMBIGUOUS, DEFAULT_CONFIG, DEFAULT_SPECIAL, Settings, load_config
from core.errors import ConfigurationError


def test_defaults():
    cfg = load_config({})
    assert cfg == DEFAULT_CONFIG
    assert cfg.tables.special == DEFAULT_SPECIAL
    assert cfg.ambiguous == frozenset(DEFAULT_AMBIGUOUS)


def test_env_overrides():
    cfg = load_config({
        "VLABS_SPECIAL_CHARS": "#$#",
        "VLABS_DEFAULT_LENGTH": "20",
        "VLABS_MAX_LENGTH": "64",
        "VLABS_MAX_COUNT": "10",
        "VLABS_LOG_LEVEL": "debug",
        "VLABS_LOG_FILE": "/tmp/vlabs.log",
        "UNRELATED": "ignored",
    })
    assert cfg.tables.special == "#$"
    assert (cfg.default_length, cfg.max_length, cfg.max_count) == (20, 64, 10)
    assert cfg.log_level == "DEBUG"
    assert cfg.log_file == "/tmp/vlabs.log"


def test_empty_values_keep_defaults():
    cfg = load_config({"VLABS_MAX_LENGTH": "", "VLABS_LOG_FILE": ""})
    assert cfg.max_length == DEFAULT_CONFIG.max_length
    assert cfg.log_file is None


@pytest.mark.parametrize("env,name", [
    ({"VLABS_MAX_LENGTH": "lots"}, "VLABS_MAX_LENGTH"),
    ({"VLABS_MAX_LENGTH": "0"}, "VLABS_MAX_LENGTH"),
    ({"VLABS_DEFAULT_LENGTH": "200"}, "VLABS_DEFAULT_LENGTH"),
    ({"VLABS_MAX_COUNT": "0"}, "VLABS_MAX_COUNT"),
    ({"VLABS_LOG_LEVEL": "chatty"}, "VLABS_LOG_LEVEL"),
])
def test_invalid_env(env, name):
    with pytest.raises(ConfigurationError) as exc:
        load_config(env)
    assert name in str(exc.value)


def test_reads_process_environment(clean_env, monkeypatch):
    monkeypatch.setenv("VLABS_MAX_COUNT", "7")
    monkeypatch.setenv("VLABS_LOG_LEVEL", "warning")
    cfg = load_config()
    assert cfg.max_count == 7
    assert cfg.log_level == "WARNING"


def test_settings_are_frozen():
    settings = Settings.model_validate({})
    with pytest.raises(Exception):
        settings.max_count = 3


def test_with_special_is_a_copy():
    custom = DEFAULT_CONFIG.with_special("~~")
    assert custom.tables.special == "~"
    assert DEFAULT_CONFIG.tables.special == DEFAULT_SPECIAL
    assert DEFAULT_CONFIG.with_special("") is DEFAULT_CONFIG
    assert DEFAULT_CONFIG.with_special(None) is DEFAULT_CONFIG


def test_config_is_frozen():
    with pytest.raises(Exception):
        DEFAULT_CONFIG.max_length = 5
