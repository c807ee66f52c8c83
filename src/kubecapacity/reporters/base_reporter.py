# src/kubecapacity/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod

from ..models.capacity import ClusterMetric


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report(self, cluster: ClusterMetric, show_pods: bool = False, show_util: bool = False):
        """
        Takes the aggregated capacity tree and presents it in a specific format.
        Reporters must not modify the tree.
        """
        pass
