# src/kubecapacity/cli/main.py
"""
This module is the main entry point for the KubeCapacity CLI.

It aggregates all commands from the submodules.
"""

import logging

import typer

from ..core.config import config
from . import report

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kubecapacity",
    help="Overview of resource requests, limits and utilization in a Kubernetes cluster.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of KubeCapacity.
    """
    if value:
        from .. import __version__

        typer.echo(f"KubeCapacity version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of KubeCapacity.
    """
    from .. import __version__

    typer.echo(f"KubeCapacity version: {__version__}")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    KubeCapacity CLI main entry point.
    """
    pass


# Register command sub-apps
app.add_typer(report.app, name="report")


if __name__ == "__main__":
    app()
