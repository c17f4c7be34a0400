"""
config.py — Environment Configuration for the Order Service

Settings are read once from environment variables at import time.
"""

import os

# Order store backend: "memory" or "sqlite"
ORDER_STORE_BACKEND = os.environ.get("ORDER_STORE_BACKEND", "memory")
ORDER_STORE_PATH = os.environ.get("ORDER_STORE_PATH", "orders.db")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
# Empty value disables the log file
LOG_FILE = os.environ.get("LOG_FILE", "order_service.log")

SERVICE_HOST = os.environ.get("SERVICE_HOST", "0.0.0.0")
SERVICE_PORT = int(os.environ.get("SERVICE_PORT", "8000"))
