#!/usr/bin/env python3
"""
Flask REST API entry point for Mood Analyzer.

Configuration comes from MOOD_* environment variables (or a .env file).
"""
import logging
import os

from mood_analyzer import load_config_from_env
from mood_analyzer.web import create_app

config = load_config_from_env()

# Setup logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = create_app(config)
logger.info(f"Mood analyzer ready (time unit: {config.time_unit_seconds}s)")


if __name__ == "__main__":
    port = int(os.getenv("PORT", 7860))
    app.run(host="0.0.0.0", port=port, debug=False)
