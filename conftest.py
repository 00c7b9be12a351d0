"""Global pytest configuration."""

import os

# Metrics stay on in tests so counter increments are exercised
os.environ.setdefault("METRICS_ENABLED", "true")
