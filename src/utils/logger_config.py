# src/utils/logger_config.py

import logging
import os
from logging.handlers import RotatingFileHandler

# Raíz del proyecto (la que contiene src/ y logs/)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

LOG_DIR = os.getenv("LOG_DIR", os.path.join(BASE_DIR, "logs"))
os.makedirs(LOG_DIR, exist_ok=True)

app_log_path = os.path.join(LOG_DIR, "app.log")
test_log_path = os.path.join(LOG_DIR, "test.log")

log_format = (
    "%(asctime)s [%(levelname)s] %(name)s "
    "(%(filename)s:%(funcName)s:%(lineno)d) "
    "[PID:%(process)d | %(threadName)s]: %(message)s"
)


def _file_handler(path: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(log_format))
    return handler


# Logger general
app_logger = logging.getLogger("roster")
app_logger.setLevel(logging.INFO)

app_stream_handler = logging.StreamHandler()
app_stream_handler.setLevel(logging.INFO)
app_stream_handler.setFormatter(logging.Formatter(log_format))

if not app_logger.handlers:
    app_logger.addHandler(_file_handler(app_log_path))
    app_logger.addHandler(app_stream_handler)

# Logger para tests
test_logger = logging.getLogger("roster.test")
test_logger.setLevel(logging.INFO)

if not test_logger.handlers:
    test_logger.addHandler(_file_handler(test_log_path))
