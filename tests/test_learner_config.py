import pytest

from cyberlearn_app.modules.learner.config import (
    ADVANCE_MANUAL,
    ADVANCE_TIMED,
    LearnerConfig,
    parse_advance_mode,
)


@pytest.mark.parametrize('raw, expected', [
    ('manual', (ADVANCE_MANUAL, None)),
    ('timed', (ADVANCE_TIMED, None)),
    ('timed(2500)', (ADVANCE_TIMED, 2500)),
    (' TIMED(10) ', (ADVANCE_TIMED, 10)),
])
def test_parse_advance_mode(raw, expected):
    assert parse_advance_mode(raw) == expected


@pytest.mark.parametrize('raw', ['auto', 'timed()', 'timed(-1)', ''])
def test_parse_advance_mode_rejects(raw):
    with pytest.raises(ValueError):
        parse_advance_mode(raw)


def test_defaults():
    config = LearnerConfig()
    assert config.content_source == 'remote'
    assert not config.is_timed
    assert config.advance_delay_ms == 3000
    assert config.content_url == 'http://localhost:3000/api/content'


def test_timed_delay_from_mode():
    config = LearnerConfig(advance_mode='timed(1500)')
    assert config.is_timed
    assert config.advance_delay_ms == 1500


def test_unknown_source():
    with pytest.raises(ValueError):
        LearnerConfig(content_source='ftp')


def test_from_env(monkeypatch):
    monkeypatch.setenv('LEARNER_CONTENT_SOURCE', 'embedded')
    monkeypatch.setenv('LEARNER_ADVANCE_MODE', 'timed(2000)')
    monkeypatch.setenv('LEARNER_API_BASE_URL', 'http://api.test')
    config = LearnerConfig.from_env()
    assert config.content_source == 'embedded'
    assert config.advance_delay_ms == 2000
    assert config.content_url == 'http://api.test/api/content'
