# src/kubecapacity/core/config.py

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from ..models.capacity import OrphanPolicy

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

COLOR_MODES = ("auto", "always", "never")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- Kubernetes connection variables ---
    # Both default to None so the kubeconfig loader applies its own defaults
    # ($KUBECONFIG / ~/.kube/config and the current-context).
    KUBECONFIG = os.getenv("KUBECONFIG")
    KUBE_CONTEXT = os.getenv("KUBE_CONTEXT")

    # --- Output variables ---
    OUTPUT_DIR = os.getenv("KUBECAPACITY_OUTPUT_DIR", "data")

    # COLOR and ORPHAN_POD_POLICY are resolved at access time so tests and
    # callers can change the environment after import.
    @property
    def COLOR(self) -> str:
        return os.getenv("KUBECAPACITY_COLOR", "auto").lower()

    @property
    def ORPHAN_POD_POLICY(self) -> OrphanPolicy:
        value = os.getenv("ORPHAN_POD_POLICY", OrphanPolicy.COUNT_IN_CLUSTER.value).lower()
        try:
            return OrphanPolicy(value)
        except ValueError:
            raise ValueError(
                f"ORPHAN_POD_POLICY must be one of {', '.join(p.value for p in OrphanPolicy)}; got '{value}'."
            )

    def color_enabled(self) -> Optional[bool]:
        """
        Maps the configured color mode to the flag the console reporter takes.

        Returns None for 'auto' so the terminal decides.
        """
        mode = self.COLOR
        if mode == "always":
            return True
        if mode == "never":
            return False
        return None

    def validate_instance(self):
        if self.COLOR not in COLOR_MODES:
            raise ValueError(f"KUBECAPACITY_COLOR must be one of {', '.join(COLOR_MODES)}.")
        policy = os.getenv("ORPHAN_POD_POLICY", OrphanPolicy.COUNT_IN_CLUSTER.value).lower()
        if policy not in [p.value for p in OrphanPolicy]:
            raise ValueError(f"ORPHAN_POD_POLICY must be one of {', '.join(p.value for p in OrphanPolicy)}.")
        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ValueError(f"LOG_LEVEL '{self.LOG_LEVEL}' is not a valid logging level.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
