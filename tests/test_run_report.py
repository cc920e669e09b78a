import io
import json
import logging
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

import run_report
from utils import logging_utils
from weather_report.data_sources import weatherstack_client
from weather_report.errors import FetchError
from weather_report.report import ADVISORY_LINES, REPORT_TITLE

from tests.sample_payloads import make_payload


class _StreamedResp:
    def __init__(self, body):
        self._body = body
        self.status_code = 200

    def iter_content(self, chunk_size=1):
        for start in range(0, len(self._body), chunk_size):
            yield self._body[start:start + chunk_size]

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class TestRunReport(unittest.TestCase):
    def test_parse_args(self):
        args = run_report.parse_args(["Russia", "Samara", "--units", "m", "--access-key", "KEY"])
        self.assertEqual((args.country, args.region, args.units, args.access_key), ("Russia", "Samara", "m", "KEY"))

    def test_log_level_is_case_insensitive(self):
        args = run_report.parse_args(["Russia", "Samara", "--log-level", "debug"])
        self.assertEqual(args.log_level, "DEBUG")

    def test_unknown_log_level_is_rejected(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            run_report.parse_args(["Russia", "Samara", "--log-level", "loud"])
        self.assertEqual(ctx.exception.code, 2)

    def test_success_exits_zero(self):
        with patch("run_report.setup_logging") as setup, patch("run_report.generate_report") as gen:
            code = run_report.main(["Russia", "Samara", "--access-key", "KEY"])
        self.assertEqual(code, 0)
        args, kwargs = gen.call_args
        self.assertEqual(args, ("KEY", "Russia", "Samara"))
        self.assertIsNone(kwargs["units"])
        self.assertFalse(setup.call_args.kwargs["log_to_stdout"])

    def test_access_key_falls_back_to_settings(self):
        with patch("run_report.setup_logging"), \
                patch("run_report.generate_report") as gen, \
                patch.object(run_report.settings, "access_key", "ENVKEY", create=False):
            run_report.main(["Russia", "Samara"])
        self.assertEqual(gen.call_args[0][0], "ENVKEY")

    def test_failure_exits_one(self):
        with patch("run_report.setup_logging"), \
                patch("run_report.generate_report", side_effect=FetchError("network down")):
            code = run_report.main(["Russia", "Samara", "--access-key", "KEY"])
        self.assertEqual(code, 1)


class TestRunReportOutput(unittest.TestCase):
    def setUp(self):
        self._orig_session = weatherstack_client.session
        root = logging.getLogger()
        self._orig_handlers = root.handlers[:]
        self._orig_level = root.level
        logging_utils._CONFIGURED = False

    def tearDown(self):
        weatherstack_client.session = self._orig_session
        root = logging.getLogger()
        root.handlers = self._orig_handlers
        root.setLevel(self._orig_level)
        logging_utils._CONFIGURED = False

    def test_stdout_holds_only_the_report(self):
        body = json.dumps(make_payload()).encode("utf-8")
        weatherstack_client.session = type("S", (), {"get": lambda *a, **k: _StreamedResp(body)})()

        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = run_report.main(["Russia", "Samara", "--access-key", "KEY", "--log-level", "DEBUG"])

        self.assertEqual(code, 0)
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], REPORT_TITLE)
        self.assertEqual(lines[-1], ADVISORY_LINES[-1])
        self.assertFalse(any(" | INFO | " in line or " | DEBUG | " in line for line in lines))
        self.assertIn("| INFO | weather_report |", err.getvalue())


if __name__ == "__main__":
    unittest.main()
