from __future__ import annotations

import io
import json
import logging
import os
import unittest
from unittest import mock

from git_ignore import __version__
from git_ignore.logging.factory import DefaultLoggerFactory
from git_ignore.logging.helpers import (
    BASE_LOGGER,
    JsonLogFormatter,
    get_logger,
    is_trace_io_enabled,
    setup_base_logger,
    trace_io,
)


class LoggerNamingTests(unittest.TestCase):
    def test_names_are_namespaced(self) -> None:
        self.assertEqual(get_logger().name, BASE_LOGGER)
        self.assertEqual(get_logger("io.cache").name, "git_ignore.io.cache")
        self.assertEqual(get_logger("git_ignore.cli").name, "git_ignore.cli")


class JsonFormatterTests(unittest.TestCase):
    def _record(self, **extra) -> logging.LogRecord:
        rec = logging.LogRecord("git_ignore.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
        for k, v in extra.items():
            setattr(rec, k, v)
        return rec

    def test_fixed_fields(self) -> None:
        payload = json.loads(JsonLogFormatter().format(self._record()))
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["module"], "git_ignore.test")
        self.assertEqual(payload["msg"], "hello world")
        self.assertEqual(payload["version"], __version__)
        self.assertTrue(payload["ts"].endswith("Z"))
        self.assertNotIn("ctx", payload)

    def test_context_is_attached(self) -> None:
        payload = json.loads(JsonLogFormatter().format(self._record(context={"name": "rust"})))
        self.assertEqual(payload["ctx"], {"name": "rust"})


class BaseLoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        base = logging.getLogger(BASE_LOGGER)
        for handler in list(base.handlers):
            if getattr(handler, "_git_ignore_base", False):
                base.removeHandler(handler)

    def test_reconfigure_replaces_own_handler_only(self) -> None:
        foreign = logging.NullHandler()
        base = logging.getLogger(BASE_LOGGER)
        base.addHandler(foreign)
        try:
            setup_base_logger(stream=io.StringIO())
            setup_base_logger(json_logs=True, stream=io.StringIO())
            own = [h for h in base.handlers if getattr(h, "_git_ignore_base", False)]
            self.assertEqual(len(own), 1)
            self.assertIsInstance(own[0].formatter, JsonLogFormatter)
            self.assertIn(foreign, base.handlers)
        finally:
            base.removeHandler(foreign)

    def test_factory_writes_json_lines(self) -> None:
        stream = io.StringIO()
        log = DefaultLoggerFactory(json_logs=True, stream=stream).get_logger("test")
        log.info("done")
        payload = json.loads(stream.getvalue().splitlines()[-1])
        self.assertEqual(payload["module"], "git_ignore.test")
        self.assertEqual(payload["msg"], "done")


class TraceIoTests(unittest.TestCase):
    def test_disabled_by_default(self) -> None:
        with mock.patch.dict(os.environ, {"GIT_IGNORE_TRACE_IO": ""}):
            self.assertFalse(is_trace_io_enabled())
            log = mock.Mock()
            trace_io(log, "read", path="x")
            log.debug.assert_not_called()

    def test_enabled_with_flag(self) -> None:
        with mock.patch.dict(os.environ, {"GIT_IGNORE_TRACE_IO": "1"}):
            log = mock.Mock()
            trace_io(log, "read", path="x")
            log.debug.assert_called_once()


if __name__ == "__main__":
    unittest.main()
