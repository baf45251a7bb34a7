"""Unit tests for logger implementations.

Tests verify that:
1. LoggerPort protocol is properly implemented
2. ConsoleLogger writes load progress through rich
3. NullLogger provides silent testing capability
"""

from io import StringIO
from pathlib import Path
import unittest

from rich.console import Console

from apsim_outputs.application.ports.services import LoggerPort
from apsim_outputs.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
)


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        """ConsoleLogger should implement LoggerPort protocol."""
        logger = ConsoleLogger()
        self.assertIsInstance(logger, LoggerPort)

    def test_null_logger_implements_loggerport(self):
        """NullLogger should implement LoggerPort protocol."""
        logger = NullLogger()
        self.assertIsInstance(logger, LoggerPort)

    def test_loggerport_has_required_methods(self):
        """LoggerPort protocol should define all required methods."""
        required_methods = {
            "info",
            "success",
            "warning",
            "error",
            "debug",
            "log_load_start",
            "log_file_loaded",
            "log_file_skipped",
            "log_merge_result",
        }
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    """Test ConsoleLogger implementation."""

    def setUp(self):
        """Set up test fixtures."""
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, force_terminal=False, width=120)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def test_initialization(self):
        """Logger should initialize with proper defaults."""
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)
        self.assertIsNone(logger._context)
        self.assertEqual(logger._stats["files_loaded"], 0)

    def test_info_logging(self):
        """info() should output message to console."""
        self.logger.info("Test message")
        self.assertIn("Test message", self.buffer.getvalue())

    def test_success_logging(self):
        """success() should output message with success indicator."""
        self.logger.success("Load complete")
        self.assertIn("Load complete", self.buffer.getvalue())

    def test_markup_in_messages_is_printed_verbatim(self):
        """File names with brackets must not be read as rich markup."""
        self.logger.error("failed on [bold]odd[/bold].out")
        self.assertIn("[bold]odd[/bold].out", self.buffer.getvalue())

    def test_warning_logging(self):
        """warning() should output message and increment warning count."""
        self.logger.warning("Warning message")
        self.assertIn("Warning message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["warnings"], 1)

    def test_error_logging(self):
        """error() should output message and increment error count."""
        self.logger.error("Error message")
        self.assertIn("Error message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["errors"], 1)

    def test_verbose_suppressed_at_normal_level(self):
        """verbose() should print nothing without -v."""
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        logger.verbose("Hidden")
        logger.debug("Hidden too")
        self.assertEqual(self.buffer.getvalue(), "")

    def test_log_load_start_sets_context(self):
        """log_load_start() should remember the source."""
        self.logger.log_load_start(Path("outputs"), 3, load_all=True)
        self.assertIsNotNone(self.logger._context)
        self.assertEqual(self.logger._context.source, "outputs")
        self.assertIn("Found 3 output file(s)", self.buffer.getvalue())

    def test_log_load_start_single_file(self):
        self.logger.log_load_start(Path("a.out"), 1, load_all=False)
        self.assertIn("Loading single file", self.buffer.getvalue())

    def test_log_file_loaded_updates_stats(self):
        """log_file_loaded() should count files and rows."""
        self.logger.log_file_loaded("a.out", 10, 5)
        self.logger.log_file_loaded("b.out", 7)
        stats = self.logger.get_stats()
        self.assertEqual(stats["files_loaded"], 2)
        self.assertEqual(stats["rows_loaded"], 17)
        self.assertIn("(5 columns)", self.buffer.getvalue())

    def test_log_file_skipped_updates_stats(self):
        self.logger.log_file_skipped("empty.out", "file is empty (0 bytes)")
        self.assertEqual(self.logger.get_stats()["files_skipped"], 1)
        self.assertIn("Skipped empty.out", self.buffer.getvalue())

    def test_duplicate_constants_warn_once_per_file(self):
        self.logger.log_duplicate_constants("a.out", ["Title", "Cultivar"])
        self.logger.log_duplicate_constants("b.out", [])
        self.assertEqual(self.logger.get_stats()["warnings"], 1)
        self.assertIn("Title, Cultivar", self.buffer.getvalue())

    def test_log_merge_result(self):
        self.logger.log_merge_result(2, 30, 8, fill=True)
        self.assertIn("union of columns", self.buffer.getvalue())

    def test_log_coercion_result_lists_text_columns(self):
        self.logger.log_coercion_result(["yield"], ["Date", "fileName"])
        output = self.buffer.getvalue()
        self.assertIn("1 numeric, 2 text", output)
        self.assertIn("Date, fileName", output)

    def test_log_final_stats(self):
        self.logger.log_file_loaded("a.out", 4)
        self.logger.log_final_stats()
        self.assertIn("Files loaded: 1", self.buffer.getvalue())

    def test_context_management(self):
        """set_context() and clear_context() manage the prefix."""
        self.logger.set_context(file_name="a.out")
        self.logger.info("message")
        self.assertIn("[a.out] message", self.buffer.getvalue())
        self.logger.clear_context()
        self.assertIsNone(self.logger._context)

    def test_get_stats_returns_copy(self):
        stats = self.logger.get_stats()
        stats["warnings"] = 99
        self.assertEqual(self.logger.get_stats()["warnings"], 0)


class TestLogContext(unittest.TestCase):
    def test_elapsed_ms_is_not_negative(self):
        context = LogContext(source="outputs")
        self.assertGreaterEqual(context.elapsed_ms(), 0)


class TestNullLogger(unittest.TestCase):
    """Test NullLogger implementation."""

    def test_all_methods_are_silent(self):
        """NullLogger should accept every call without output."""
        logger = NullLogger()
        logger.info("x")
        logger.success("x")
        logger.warning("x")
        logger.error("x")
        logger.debug("x")
        logger.verbose("x")
        logger.log_load_start(Path("."), 0, load_all=True)
        logger.log_file_loaded("a.out", 1, 1)
        logger.log_file_skipped("a.out", "empty")
        logger.log_duplicate_constants("a.out", ["Title"])
        logger.log_merge_result(1, 1, 1, fill=False)
        logger.log_coercion_result([], [])
        logger.log_final_stats()
