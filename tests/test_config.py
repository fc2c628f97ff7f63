import logging

import pytest

from rangealgo import Config, log


@pytest.fixture
def restore_logger():
    yield
    log.configure(Config.from_env())


def test_defaults():
    config = Config()
    assert config.log_level == 'WARNING'
    assert config.color_log is True


def test_log_level_is_normalized():
    assert Config(log_level='debug').log_level == 'DEBUG'


def test_invalid_log_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        Config(log_level='LOUD')


def test_from_env(monkeypatch):
    monkeypatch.setenv('RANGEALGO_LOG_LEVEL', 'info')
    monkeypatch.setenv('RANGEALGO_NO_COLOR_LOG', '1')
    config = Config.from_env()
    assert config.log_level == 'INFO'
    assert config.color_log is False


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv('RANGEALGO_LOG_LEVEL', raising=False)
    monkeypatch.delenv('RANGEALGO_NO_COLOR_LOG', raising=False)
    assert Config.from_env() == Config()


def test_from_env_invalid_level(monkeypatch):
    monkeypatch.setenv('RANGEALGO_LOG_LEVEL', 'verbose')
    config = Config.from_env()
    assert config.log_level == 'WARNING'


def test_load_toml(tmp_path):
    path = tmp_path / "rangealgo.toml"
    path.write_text('[logging]\nlevel = "error"\ncolor = false\n')
    config = Config.load_toml(path)
    assert config.log_level == 'ERROR'
    assert config.color_log is False


def test_load_toml_partial(tmp_path):
    path = tmp_path / "rangealgo.toml"
    path.write_text('[logging]\nlevel = "DEBUG"\n')
    assert Config.load_toml(path) == Config(log_level='DEBUG')


def test_load_toml_missing_section(tmp_path):
    path = tmp_path / "rangealgo.toml"
    path.write_text('[other]\nkey = 1\n')
    with pytest.raises(ValueError, match=r"Missing \[logging\] section"):
        Config.load_toml(path)


@pytest.mark.parametrize("body, message", [
    ('color = "false"\n', "Invalid color setting"),
    ('color = 0\n', "Invalid color setting"),
    ('level = 5\n', "Invalid log level"),
    ('level = "LOUD"\n', "Invalid log level"),
])
def test_load_toml_invalid_values(tmp_path, body, message):
    path = tmp_path / "rangealgo.toml"
    path.write_text("[logging]\n" + body)
    with pytest.raises(ValueError, match=message):
        Config.load_toml(path)


def test_configure_plain_handler(restore_logger):
    log.configure(Config(log_level='DEBUG', color_log=False))
    assert log.logger.level == logging.DEBUG
    assert len(log.logger.handlers) == 1
    assert type(log.logger.handlers[0]) is logging.StreamHandler


def test_configure_rich_handler(restore_logger):
    rich_logging = pytest.importorskip("rich.logging")
    log.configure(Config(log_level='INFO', color_log=True))
    assert log.logger.level == logging.INFO
    assert isinstance(log.logger.handlers[0], rich_logging.RichHandler)


def test_log_helpers(caplog):
    caplog.set_level(logging.DEBUG, logger="rangealgo")
    log.debug("debug %d", 1)
    log.info("info %s", "x")
    log.warning("warning")
    log.error("error %d%%", 5)
    assert [r.getMessage() for r in caplog.records] == ["debug 1", "info x", "warning", "error 5%"]
