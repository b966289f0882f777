"""Root conftest — shared test configuration."""

import os

# Human-readable logs and a stable server URL regardless of the developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SERVER_URL", "http://localhost:3000")
