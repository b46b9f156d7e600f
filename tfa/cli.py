"""Command line entry point for tfa.

Running ``tfa`` without a subcommand scans the current directory::

    tfa                 # scan the working directory
    tfa scan src/       # scan a specific directory
    tfa export org.cccs.jslibs jquery.collapsible 1.0.0
    tfa list            # show artifacts exported into the working directory
    tfa serve           # expose scan/export over HTTP
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from tfa import __version__
from tfa.bootstrap import ServiceContainer, ensure_tfa_home
from tfa.logging_config import configure_logging
from tfa.modules.artifactfetch.domain import ArtifactCoordinates, ExportStatus, ProcessAction
from tfa.modules.artifactfetch.util.exceptions import RepositoryRootError, TfaError
from tfa.settings import Settings, get_settings


class CliState:
    """Per-invocation state shared by subcommands."""

    def __init__(self, settings: Settings, quiet: bool = False) -> None:
        self.settings = settings
        self.quiet = quiet
        self._container: Optional[ServiceContainer] = None

    def container(self) -> ServiceContainer:
        if self._container is None:
            try:
                ensure_tfa_home(self.settings)
            except RepositoryRootError as exc:
                raise click.ClickException(str(exc)) from exc
            self._container = ServiceContainer(self.settings)
            click.get_current_context().call_on_close(self._container.close)
        return self._container

    def echo(self, message: str, **style) -> None:
        if self.quiet:
            return
        click.echo(click.style(message, **style) if style else message)


@click.group(invoke_without_command=True)
@click.version_option(__version__, "-v", "--version", prog_name="tfa")
@click.option("-q", "--quiet", is_flag=True, help="Output as little as possible, overrides verbose")
@click.option("-V", "--verbose", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """Scan directories for tfa managed files and fetch their artifacts."""
    settings = get_settings()
    if quiet:
        level = "WARNING"
    elif verbose:
        level = "DEBUG"
    else:
        level = settings.tfa_log_level
    configure_logging(level)
    ctx.obj = CliState(settings, quiet=quiet)
    if ctx.invoked_subcommand is None:
        ctx.invoke(scan, directory=None)


@cli.command("scan")
@click.argument(
    "directory",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.pass_obj
def scan(state: CliState, directory: Optional[Path]) -> None:
    """Substitute managed files under DIRECTORY from the local repository."""
    report = state.container().finder.run(directory or Path.cwd())

    state.echo(
        f"{report.count(ProcessAction.SUBSTITUTED_FROM_CACHE)} substituted, "
        f"{report.count(ProcessAction.FETCH_TRIGGERED)} fetched, "
        f"{report.count(ProcessAction.SKIPPED)} skipped",
        fg="green" if report.ok else "yellow",
    )
    for failure in report.failures:
        click.echo(click.style(f"✗ {failure.file_path}: {failure.error}", fg="red"), err=True)
    if not report.ok:
        sys.exit(1)


@cli.command("export")
@click.argument("group")
@click.argument("artifact")
@click.argument("version")
@click.option("--base-url", "-u", default=None, help="Metadata endpoint (defaults to TFA_REMOTE_BASE_URL)")
@click.option(
    "--dir",
    "-d",
    "working_dir",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory to export into (defaults to the current directory)",
)
@click.pass_obj
def export(
    state: CliState,
    group: str,
    artifact: str,
    version: str,
    base_url: Optional[str],
    working_dir: Optional[Path],
) -> None:
    """Export GROUP:ARTIFACT:VERSION into the working directory."""
    coords = ArtifactCoordinates(groupid=group, artifactid=artifact, version=version)
    try:
        result = state.container().exporter.export(coords, base_url=base_url, working_dir=working_dir)
    except TfaError as exc:
        click.echo(click.style(f"✗ Export of {coords} failed: {exc}", fg="red"), err=True)
        sys.exit(1)

    if result.status is ExportStatus.ALREADY_EXISTS:
        state.echo(f"{result.file_path.name} already exists, skipping download", fg="yellow")
    else:
        state.echo(f"✓ {result.file_path} ({result.bytes_written} bytes)", fg="green")


@cli.command("list")
@click.option(
    "--dir",
    "-d",
    "working_dir",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory whose exports should be listed",
)
@click.pass_obj
def list_exported(state: CliState, working_dir: Optional[Path]) -> None:
    """List artifacts exported into the working directory."""
    descriptors = state.container().exporter.list_exported(working_dir)
    if not descriptors:
        state.echo("No exported artifacts found.", fg="yellow")
        return
    for descriptor in descriptors:
        click.echo(
            f"{descriptor.groupid}:{descriptor.artifactid}:{descriptor.version}  "
            f"{descriptor.file_name}  {descriptor.url}"
        )


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", "-p", default=8000, show_default=True, type=int, help="Bind port")
@click.pass_obj
def serve(state: CliState, host: str, port: int) -> None:  # pragma: no cover - blocks on the server loop
    """Serve the scan/export HTTP API with uvicorn."""
    import uvicorn

    from tfa.factory import create_app

    uvicorn.run(create_app(state.settings, container=state.container()), host=host, port=port)


def main() -> None:  # pragma: no cover - console script
    cli(prog_name="tfa")


if __name__ == "__main__":  # pragma: no cover
    main()
