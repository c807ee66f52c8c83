# src/kubecapacity/cli/report.py
"""
Implements the `report` command for the KubeCapacity CLI.
"""

import asyncio
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import KubeCapacityError
from ..core.factory import get_processor
from ..exporters.csv_exporter import CSVExporter
from ..exporters.json_exporter import JSONExporter
from ..models.capacity import ClusterMetric
from ..models.cli import DisplayOptions, FilterOptions, OutputOptions
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

app = typer.Typer(help="Show resource requests, limits and utilization per node and pod.", add_completion=False)


async def handle_export(cluster: ClusterMetric, output_options: OutputOptions, display_options: DisplayOptions):
    """Handles writing the capacity tree to a file."""
    if output_options.format == "json":
        exporter = JSONExporter()
    else:
        exporter = CSVExporter()

    if not output_options.output_path:
        output_path = Path.cwd() / config.OUTPUT_DIR / exporter.DEFAULT_FILENAME
    else:
        output_path = Path(output_options.output_path)

    try:
        written_path = await exporter.export(
            cluster,
            str(output_path),
            include_pods=display_options.pods,
            include_util=display_options.util,
        )
        logger.info(f"Successfully exported report to {written_path}")
        print(f"Report exported to: {written_path}", file=sys.stderr)
    except OSError as e:
        logger.error(f"Failed to export report to {output_path}: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def report(
    ctx: typer.Context,
    pods: Annotated[bool, typer.Option("--pods", "-p", help="Include a row for every pod.")] = False,
    util: Annotated[bool, typer.Option("--util", "-u", help="Include live utilization from metrics-server.")] = False,
    namespace: Annotated[
        Optional[str], typer.Option("--namespace", "-n", help="Only include pods in this namespace.")
    ] = None,
    pod_labels: Annotated[
        Optional[str], typer.Option("--pod-labels", "-l", help="Label selector to filter pods (e.g. 'app=web').")
    ] = None,
    node_labels: Annotated[Optional[str], typer.Option("--node-labels", help="Label selector to filter nodes.")] = None,
    namespace_labels: Annotated[
        Optional[str], typer.Option("--namespace-labels", help="Label selector to filter namespaces.")
    ] = None,
    kubeconfig: Annotated[Optional[str], typer.Option("--kubeconfig", help="Path to a kubeconfig file.")] = None,
    context: Annotated[Optional[str], typer.Option("--context", help="The kubeconfig context to use.")] = None,
    color: Annotated[
        Optional[bool],
        typer.Option("--color/--no-color", help="Force colored output on or off. Default: KUBECAPACITY_COLOR."),
    ] = None,
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
    """
    Show requested, limited and used CPU and memory for every node.

    Displays a table in the console by default.
    Use --output (csv/json) to export to a file.
    """
    if ctx.invoked_subcommand is not None:
        return

    filters = FilterOptions(
        namespace=namespace, pod_labels=pod_labels, node_labels=node_labels, namespace_labels=namespace_labels
    )
    display = DisplayOptions(pods=pods, util=util, color=color if color is not None else config.color_enabled())
    output = OutputOptions(output_format=output_format, output_path=output_path)

    async def _report_async():
        processor = get_processor(kubeconfig=kubeconfig, context=context)
        try:
            cluster = await processor.run(filters, include_utilization=display.util)
        finally:
            await processor.close()

        if output.is_enabled:
            await handle_export(cluster, output, display)
        else:
            ConsoleReporter(color=display.color).report(cluster, show_pods=display.pods, show_util=display.util)

    try:
        asyncio.run(_report_async())
    except typer.Exit:
        raise
    except KubeCapacityError as e:
        logger.error(f"{e}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        logger.error("Report generation failed: %s", traceback.format_exc())
        raise typer.Exit(code=1)
