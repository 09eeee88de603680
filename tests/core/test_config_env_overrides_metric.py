import logging
import os

from core.config import clear_config_cache, as_dict
from core import metrics


def test_env_override_metric_and_logging(caplog, tmp_path):
    metrics.reset_for_tests()
    os.environ["MODELHUB_CONFIG_DIR"] = str(tmp_path)
    clear_config_cache()
    os.environ["MODELHUB__API__PORT"] = "9100"
    caplog.set_level(logging.INFO, logger="core.config")
    try:
        cfg = as_dict()  # triggers load with env
        assert cfg["api"]["port"] == 9100
        counters = metrics.snapshot()["counters"]
        assert counters.get("env_override_total{path=api.port}") == 1.0
        assert "config-env-override" in caplog.text
        assert "path=api.port" in caplog.text
        assert "9100" not in caplog.text
    finally:
        del os.environ["MODELHUB__API__PORT"]
        clear_config_cache()


def test_env_override_bool_cast(tmp_path):
    os.environ["MODELHUB_CONFIG_DIR"] = str(tmp_path)
    os.environ["MODELHUB__METRICS__ENABLED"] = "false"
    clear_config_cache()
    try:
        assert as_dict()["metrics"]["enabled"] is False
    finally:
        del os.environ["MODELHUB__METRICS__ENABLED"]
        clear_config_cache()
