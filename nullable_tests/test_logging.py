import json
import logging

import pytest
import structlog

from nullable.utils.logging import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_output(restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(json_output=True)
    logger = structlog.get_logger('nullable_tests')
    logger.debug('hidden')
    logger.info('loading settings', source='some.yml')

    lines = capsys.readouterr().err.strip().splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event['event'] == 'loading settings'
    assert event['source'] == 'some.yml'
    assert event['level'] == 'info'
    assert event['logger'] == 'nullable_tests'


def test_console_output_with_debug(restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(debug=True)
    logger = structlog.get_logger('nullable_tests')
    logger.debug('scan failed', type='Int64')

    err = capsys.readouterr().err
    assert 'scan failed' in err
    assert 'type=Int64' in err
