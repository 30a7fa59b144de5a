"""Tests for _logging.py"""

import logging

import pytest

from resamplekit._logging import disable_logging, get_logger, setup_basic_logging
from resamplekit.splitters.vfold import vfold_cv


class TestGetLogger:

    def test_prefixes_bare_module_name(self):
        assert get_logger("splitters.vfold").name == "resamplekit.splitters.vfold"

    def test_main_becomes_resamplekit(self):
        assert get_logger("__main__").name == "resamplekit"

    def test_already_prefixed_unchanged(self):
        assert get_logger("resamplekit.core").name == "resamplekit.core"


class TestSetupBasicLogging:

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        """Restore the resamplekit logger after each test."""
        logger = logging.getLogger("resamplekit")
        original_level = logger.level
        original_handlers = logger.handlers[:]
        original_propagate = logger.propagate
        yield
        logger.handlers = original_handlers
        logger.setLevel(original_level)
        logger.propagate = original_propagate

    def test_sets_level(self):
        setup_basic_logging(level=logging.WARNING)
        assert logging.getLogger("resamplekit").level == logging.WARNING

    def test_does_not_duplicate_handlers(self):
        setup_basic_logging()
        initial_count = len(logging.getLogger("resamplekit").handlers)
        setup_basic_logging()
        assert len(logging.getLogger("resamplekit").handlers) == initial_count

    def test_disables_propagation(self):
        setup_basic_logging()
        assert logging.getLogger("resamplekit").propagate is False

    def test_disable_logging(self):
        disable_logging()
        assert logging.getLogger("resamplekit").level > logging.CRITICAL


class TestStrategyLogging:

    def test_vfold_logs_summary(self, cars, caplog):
        with caplog.at_level(logging.DEBUG, logger="resamplekit"):
            vfold_cv(cars, v=4, rng=0)
        assert any("vfold_cv: 4 folds" in r.getMessage() for r in caplog.records)
