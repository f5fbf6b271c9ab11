import logging

import pytest

from couchwire.utils.logging_utils import LoggingConfiguration, LoggingContext


@pytest.fixture
def logger():
    return logging.getLogger("couchwire.tests.logging")


def test_success_logs_entry_and_success(logger, caplog):
    config = LoggingConfiguration(entry_msg="start", success_msg="done", failure_msg="failed", logger=logger)

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with LoggingContext(config):
            pass

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["start", "done"]
    assert caplog.records[0].levelno == logging.DEBUG
    assert caplog.records[1].levelno == logging.INFO


def test_failure_logs_and_propagates(logger, caplog):
    config = LoggingConfiguration(success_msg="done", failure_msg="failed", logger=logger)

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(RuntimeError):
            with LoggingContext(config):
                raise RuntimeError("boom")

    assert [record.getMessage() for record in caplog.records] == ["failed: boom"]
    assert caplog.records[0].levelno == logging.WARNING


def test_no_messages_logs_nothing(caplog):
    with caplog.at_level(logging.DEBUG):
        with LoggingContext():
            pass

    assert caplog.records == []
