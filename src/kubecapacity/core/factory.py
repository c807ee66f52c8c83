# src/kubecapacity/core/factory.py
"""
Factory function to instantiate the CapacityProcessor with its collectors.
"""

import logging
import traceback
from typing import Optional

import typer

from ..collectors.metrics_collector import PodMetricsCollector
from ..collectors.node_collector import NodeCollector
from ..collectors.pod_collector import PodCollector
from ..core.config import config
from ..core.processor import CapacityProcessor

logger = logging.getLogger(__name__)


def get_processor(kubeconfig: Optional[str] = None, context: Optional[str] = None) -> CapacityProcessor:
    """
    Instantiates and returns a fully configured CapacityProcessor.

    Explicit arguments take precedence over KUBECONFIG / KUBE_CONTEXT.
    """
    logger.debug("Initializing collectors and processor...")
    kubeconfig = kubeconfig or config.KUBECONFIG
    context = context or config.KUBE_CONTEXT
    try:
        return CapacityProcessor(
            node_collector=NodeCollector(kubeconfig=kubeconfig, context=context),
            pod_collector=PodCollector(kubeconfig=kubeconfig, context=context),
            metrics_collector=PodMetricsCollector(kubeconfig=kubeconfig, context=context),
            orphan_policy=config.ORPHAN_POD_POLICY,
        )
    except Exception as e:
        logger.error(f"An error occurred during processor initialization: {e}")
        logger.error("Processor initialization failed: %s", traceback.format_exc())
        raise typer.Exit(code=1)
