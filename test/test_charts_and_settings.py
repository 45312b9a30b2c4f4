"""Tests de figuras del dashboard y de la configuración"""

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from sample_data import make_mtc_records, make_wells

from config.settings import APISettings, DashboardSettings, LoggingSettings
from services.aggregation import availability_breakdown, count_by_site
from services.charts import status_count_figure, status_share_figure, wells_by_site_figure


class TestCharts(unittest.TestCase):

    def setUp(self):
        self.rows = availability_breakdown(make_mtc_records())

    def test_status_count_figure(self):
        figure = status_count_figure(self.rows)
        bar = figure.data[0]
        self.assertEqual(bar.orientation, "h")
        self.assertEqual(list(bar.x), [1, 1, 0, 1, 0])
        self.assertEqual(list(bar.y)[0], "Operando")
        self.assertEqual(list(bar.marker.color)[3], "#f44336")

    def test_status_share_figure(self):
        figure = status_share_figure(self.rows)
        pie = figure.data[0]
        self.assertEqual(list(pie.values), [1, 1, 0, 1, 0])
        self.assertEqual(pie.hole, 0.5)

    def test_wells_by_site_figure(self):
        figure = wells_by_site_figure(count_by_site(make_wells()))
        active, inactive = figure.data
        self.assertEqual(list(active.x), ["Samaria", "Muspac", "Bellota", "Desconocido"])
        self.assertEqual(list(active.y), [1, 0, 1, 1])
        self.assertEqual(list(inactive.y), [1, 1, 0, 0])
        self.assertEqual(figure.layout.barmode, "group")


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            api = APISettings()
            dashboard = DashboardSettings()
        self.assertEqual(api.base_url, "http://localhost:5096/api")
        self.assertEqual(dashboard.default_site, "Samaria")

    def test_env_overrides(self):
        env = {"API_BASE_URL": "http://otro:9000/api/", "API_TIMEOUT": "3"}
        with patch.dict(os.environ, env, clear=True):
            api = APISettings()
        self.assertEqual(api.base_url, "http://otro:9000/api")
        self.assertEqual(api.timeout, 3.0)
        self.assertEqual(api.endpoint("/Pozos"), "http://otro:9000/api/Pozos")

    def test_logging_handlers_console_only_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            handlers = LoggingSettings().handlers()
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.StreamHandler)

    def test_logging_handlers_add_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "motocompresores.log"
            with patch.dict(os.environ, {"LOG_FILE": str(log_file)}, clear=True):
                handlers = LoggingSettings().handlers()
            try:
                self.assertEqual(len(handlers), 2)
                self.assertIsInstance(handlers[1], logging.FileHandler)
                self.assertEqual(Path(handlers[1].baseFilename), log_file)
            finally:
                for handler in handlers:
                    handler.close()


if __name__ == "__main__":
    unittest.main()
