# tests/utils_tests/test_logger.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Logger configuration test suite

import io
import logging
import pytest
from utils.logger import (
    CNFFormatter,
    CNFLogger,
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)


class TestLoggerConfiguration:
    """Global logger instance and level selection."""

    def teardown_method(self):
        set_log_level(LogLevel.INFO)

    def test_single_global_instance(self):
        assert get_logger() is get_logger()

    @pytest.mark.parametrize(
        "verbose, debug, level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.INFO),
            (False, True, logging.DEBUG),
            (True, True, logging.DEBUG),
        ],
    )
    def test_configure_logging_levels(self, verbose, debug, level):
        configure_logging(verbose=verbose, debug=debug)

        logger = get_logger().logger
        assert logger.level == level
        assert all(handler.level == level for handler in logger.handlers)

    def test_does_not_propagate(self):
        assert get_logger().logger.propagate is False


class TestFormatter:
    """Message formatting per level."""

    def _record(self, level):
        return logging.LogRecord("clausal", level, __file__, 1, "message", None, None)

    def test_info_is_plain(self):
        assert CNFFormatter().format(self._record(logging.INFO)) == "message"

    def test_debug_is_tagged(self):
        assert CNFFormatter().format(self._record(logging.DEBUG)) == "[DEBUG] message"

    def test_warning_is_tagged(self):
        assert CNFFormatter().format(self._record(logging.WARNING)) == "[WARNING] message"


class TestStageReport:
    """Derivation report helpers write through the configured stream."""

    def test_stage_lines(self):
        stream = io.StringIO()
        logger = CNFLogger("clausal_report_test", stream=stream)

        logger.stage_header(1, "Skolemização")
        logger.stage_step(r"\exists y substituído por f1(x)")
        logger.stage_result(r"\forall x P(x,f1(x))")

        assert stream.getvalue().splitlines() == [
            "",
            "1. Skolemização",
            r"   - \exists y substituído por f1(x)",
            r"   => \forall x P(x,f1(x))",
        ]

    def test_debug_hidden_at_info(self):
        stream = io.StringIO()
        logger = CNFLogger("clausal_quiet_test", stream=stream)

        logger.rewrite_applied("distribute", "a", "b")

        assert stream.getvalue() == ""

    def test_errors_go_to_error_stream(self):
        stream = io.StringIO()
        error_stream = io.StringIO()
        logger = CNFLogger("clausal_split_test", stream=stream, error_stream=error_stream)

        logger.stage_result("p")
        logger.error("Formula parsing error: Unexpected end of formula")

        assert stream.getvalue() == "   => p\n"
        assert error_stream.getvalue() == (
            "[ERROR] Formula parsing error: Unexpected end of formula\n"
        )
