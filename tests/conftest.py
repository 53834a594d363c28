"""Test harness configuration: run Qt headless when no display is available."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
