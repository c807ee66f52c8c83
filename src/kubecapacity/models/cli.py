# src/kubecapacity/models/cli.py
"""
Data models for KubeCapacity CLI command options using Typer.
This allows for clean dependency injection of parameters.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

OUTPUT_FORMATS = ("csv", "json")


class FilterOptions:
    """Dependency-injectable model for the pod, node and namespace filters."""

    def __init__(
        self,
        namespace: Annotated[
            Optional[str],
            typer.Option("--namespace", "-n", help="Only include pods in this namespace."),
        ] = None,
        pod_labels: Annotated[
            Optional[str],
            typer.Option("--pod-labels", "-l", help="Label selector to filter pods (e.g. 'app=web')."),
        ] = None,
        node_labels: Annotated[
            Optional[str],
            typer.Option("--node-labels", help="Label selector to filter nodes."),
        ] = None,
        namespace_labels: Annotated[
            Optional[str],
            typer.Option("--namespace-labels", help="Label selector to filter namespaces."),
        ] = None,
    ):
        self.namespace = namespace
        self.pod_labels = pod_labels
        self.node_labels = node_labels
        self.namespace_labels = namespace_labels


class DisplayOptions:
    """Dependency-injectable model for what the console table shows."""

    def __init__(
        self,
        pods: Annotated[bool, typer.Option("--pods", "-p", help="Include a row for every pod.")] = False,
        util: Annotated[bool, typer.Option("--util", "-u", help="Include live utilization columns.")] = False,
        color: Annotated[
            Optional[bool],
            typer.Option("--color/--no-color", help="Force colored output on or off. Default: auto-detect."),
        ] = None,
    ):
        self.pods = pods
        self.util = util
        self.color = color


class OutputOptions:
    """Dependency-injectable model for output/export options."""

    def __init__(
        self,
        output_format: Annotated[
            Optional[str],
            typer.Option(
                "--output",
                "-o",
                help="Output format (csv/json). If set, writes to a file instead of the console.",
                case_sensitive=False,
            ),
        ] = None,
        output_path: Annotated[
            Optional[Path],
            typer.Option(
                "--output-path",
                help="Specify output file path. Default: './data/kubecapacity-report.<format>'",
                exists=False,
                dir_okay=False,
                writable=True,
            ),
        ] = None,
    ):
        self.output_format = output_format
        self.output_path = output_path
        self._validate()

    def _validate(self):
        """Validates the output format."""
        if self.output_format and self.output_format.lower() not in OUTPUT_FORMATS:
            raise typer.BadParameter(f"Invalid output format '{self.output_format}'. Must be 'csv' or 'json'.")

    @property
    def is_enabled(self) -> bool:
        """Checks if file output is enabled."""
        return self.output_format is not None

    @property
    def format(self) -> str:
        """Returns the validated, lower-cased format."""
        return self.output_format.lower() if self.output_format else "csv"
