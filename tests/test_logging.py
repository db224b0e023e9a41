"""
Tests for arcadekit.logging: module loggers, level configuration,
environment parsing, and structured record sinks.

Run with: pytest tests/test_logging.py -v
"""

import json

import pytest

from arcadekit import logging as alog
from arcadekit.logging import (
    FileSink,
    LogLevel,
    NullSink,
    close_all_sinks,
    configure_logging,
    create_sink_for_module,
    emit_record,
    get_logger,
    register_sink,
    set_default_sink,
)


@pytest.fixture(autouse=True)
def isolated_config():
    """Snapshot and restore the global logging config around each test."""
    saved = {
        'default_level': alog._config['default_level'],
        'module_levels': dict(alog._config['module_levels']),
        'log_dir': alog._config['log_dir'],
        'modules': dict(alog._config['modules']),
    }
    yield
    close_all_sinks()
    alog._config.update(saved)


class TestLogger:
    """Test per-module loggers."""

    def test_cached(self):
        assert get_logger('simulation') is get_logger('simulation')

    def test_format(self, capsys):
        configure_logging('DEBUG')
        get_logger('placement').debug("Placed obstacle")
        assert capsys.readouterr().out == "[placement] DEBUG: Placed obstacle\n"

    def test_below_level_suppressed(self, capsys):
        configure_logging('WARNING')
        get_logger('simulation').info("Phase edit -> play")
        assert capsys.readouterr().out == ""

    def test_per_module_level(self, capsys):
        configure_logging('ERROR', modules={'collision': 'DEBUG'})
        get_logger('collision').debug("hit")
        get_logger('powerups').debug("picked")
        out = capsys.readouterr().out
        assert "[collision] DEBUG: hit" in out
        assert "powerups" not in out

    def test_percent_args(self, capsys):
        configure_logging('INFO')
        get_logger('intercept').info("score=%d", 15)
        assert "score=15" in capsys.readouterr().out

    def test_disable(self, capsys):
        configure_logging('TRACE')
        alog.disable_logging()
        get_logger('simulation').critical("nope")
        assert capsys.readouterr().out == ""

    def test_exception_includes_traceback(self, capsys):
        configure_logging('INFO')
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            get_logger('main').exception("Crashed")
        out = capsys.readouterr().out
        assert "[main] ERROR: Crashed" in out
        assert "RuntimeError: boom" in out

    @pytest.mark.parametrize("name,level", [
        ('trace', LogLevel.TRACE),
        ('Debug', LogLevel.DEBUG),
        ('WARN', LogLevel.WARNING),
        ('off', LogLevel.OFF),
        ('bogus', LogLevel.INFO),
    ])
    def test_level_names(self, name, level):
        assert alog._level_from_string(name) == level


class TestEnvConfig:
    """Test loading settings from environment variables."""

    @pytest.mark.parametrize("raw,parsed", [
        ('true', True),
        ('off', False),
        ('42', 42),
        ('2.5', 2.5),
        ('/tmp/logs', '/tmp/logs'),
    ])
    def test_parse_env_value(self, raw, parsed):
        assert alog._parse_env_value(raw) == parsed

    def test_module_level_from_env(self, monkeypatch):
        monkeypatch.setenv('INTERCEPT_LOG_SIMULATION', 'DEBUG')
        alog.load_env_config()
        assert get_logger('simulation').level == LogLevel.DEBUG

    def test_module_settings_from_env(self, monkeypatch):
        monkeypatch.setenv('INTERCEPT_LOGGING_ROUNDS_ENABLED', 'true')
        alog.load_env_config()
        assert alog.get_module_config('rounds') == {'enabled': True}

    def test_log_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv('INTERCEPT_LOG_DIR', str(tmp_path))
        alog.load_env_config()
        assert alog.get_log_dir() == str(tmp_path)


class TestSinks:
    """Test structured record sinks."""

    def test_no_sink(self):
        assert not emit_record('rounds', {'outcome': 'win'})

    def test_null_sink(self):
        register_sink('rounds', NullSink())
        assert emit_record('rounds', {'outcome': 'win'})

    def test_default_sink(self, tmp_path):
        sink = FileSink(log_dir=str(tmp_path), session_name='s')
        set_default_sink(sink)
        assert emit_record('anything', {'a': 1})

    def test_file_sink_jsonl(self, tmp_path):
        sink = FileSink(log_dir=str(tmp_path), session_name='session')
        register_sink('rounds', sink)
        emit_record('rounds', {'outcome': 'lose', 'score': 10})
        path = sink.log_paths['rounds']
        sink.close()

        assert path.name == 'session_rounds.jsonl'
        lines = [json.loads(line) for line in path.read_text().splitlines()]
        assert lines[0]['type'] == 'header'
        assert lines[0]['module'] == 'rounds'
        assert lines[1]['outcome'] == 'lose'
        assert lines[1]['score'] == 10
        assert 'wall_time' in lines[1]
        assert lines[-1]['type'] == 'footer'

    def test_create_sink_disabled(self):
        assert isinstance(create_sink_for_module('nothing_configured'), NullSink)

    def test_create_sink_enabled(self, tmp_path):
        alog._config['modules']['rounds'] = {'enabled': True, 'dir': str(tmp_path)}
        sink = create_sink_for_module('rounds', session_name='x')
        assert isinstance(sink, FileSink)
        sink.emit('rounds', {'n': 1})
        sink.close()
        assert (tmp_path / 'x_rounds.jsonl').exists()
