import os
import unittest

from pydantic import ValidationError

from weather_report.config import Settings


class TestConfig(unittest.TestCase):
    def setUp(self):
        self._saved = {k: v for k, v in os.environ.items() if k.startswith("WEATHER_")}
        for key in self._saved:
            os.environ.pop(key)

    def tearDown(self):
        for key in [k for k in os.environ if k.startswith("WEATHER_")]:
            os.environ.pop(key)
        os.environ.update(self._saved)

    def test_settings_defaults(self):
        s = Settings()
        self.assertIsNone(s.access_key)
        self.assertEqual(s.base_url, "https://api.weatherstack.com")
        self.assertIsNone(s.units)
        self.assertEqual(s.request_timeout_seconds, 10.0)
        self.assertEqual(s.max_body_bytes, 1_048_576)

    def test_settings_env_override(self):
        os.environ["WEATHER_ACCESS_KEY"] = "abc123"
        os.environ["WEATHER_BASE_URL"] = "http://example.com/"
        os.environ["WEATHER_REQUEST_TIMEOUT_SECONDS"] = "2.5"
        s = Settings()
        self.assertEqual(s.access_key, "abc123")
        self.assertEqual(s.base_url, "http://example.com")
        self.assertEqual(s.request_timeout_seconds, 2.5)

    def test_units_validation(self):
        self.assertEqual(Settings(units="f").units, "f")
        self.assertIsNone(Settings(units="").units)
        with self.assertRaises(ValidationError):
            Settings(units="kelvin")

    def test_body_limit_must_be_positive(self):
        with self.assertRaises(ValidationError):
            Settings(max_body_bytes=0)

    def test_log_level_is_normalized(self):
        self.assertEqual(Settings(log_level="debug").log_level, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(log_level="loud")


if __name__ == "__main__":
    unittest.main()
