"""
KubeCapacity CLI Package

This package exposes the top-level Typer `app` so tests and the console
entrypoint can import `kubecapacity.cli.app`.
"""

import logging

from ..core.processor import CapacityProcessor

# Re-export commonly patched symbols for tests
from ..reporters.console_reporter import ConsoleReporter
from .main import app

logger = logging.getLogger(__name__)

__all__ = ["app", "CapacityProcessor", "ConsoleReporter"]
