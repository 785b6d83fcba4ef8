import logging
from typing import NoReturn, Optional

import typer
from typing_extensions import Annotated

from condaview import __version__
from condaview._src.conda import Conda
from condaview._src.constants import (
    CONDA_EXE_ENVVARS,
    DEFAULT_CONDA_EXE,
    SupportedOutputFormats,
)
from condaview._src.exceptions import (
    CondaError,
    CondaNotInstalled,
    CondaParseError,
    EnvironmentNotFound,
)
from condaview._src.log import setup_logging
from condaview._src import presenter


logger = logging.getLogger(__name__)


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"condaview {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    conda_exe: str = typer.Option(
        DEFAULT_CONDA_EXE,
        "--conda-exe",
        envvar=CONDA_EXE_ENVVARS,
        help="name or path of the conda executable",
    ),
    verbose: Annotated[bool, typer.Option(
        "--verbose", "-v",
        help="show debug logging"
    )] = False,
    version: Annotated[Optional[bool], typer.Option(
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="show the version and exit"
    )] = None,
):
    """Inspect conda environments and the packages installed in them"""
    setup_logging(verbose)
    # an already populated ctx.obj is kept, so callers can supply their own Conda
    if ctx.obj is None:
        ctx.obj = Conda(executable=conda_exe)
    logger.debug("using conda executable %s", ctx.obj.executable)


def _fail(conda: Conda, err: CondaError) -> NoReturn:
    """Report `err` on stderr with a hint on how to fix it, then exit"""
    typer.echo(f"Error: {err}", err=True)

    if isinstance(err, EnvironmentNotFound):
        typer.echo("\nRun 'condaview list-envs' to see available environments.", err=True)
    elif isinstance(err, CondaParseError):
        typer.echo("\nThe output from conda was in an unexpected format.", err=True)

    if isinstance(err, CondaNotInstalled) or not conda.is_installed():
        typer.echo("\nIt appears conda is not installed or in your PATH.", err=True)
        typer.echo("Please install conda or ensure it's properly configured.", err=True)

    raise typer.Exit(code=1)


@app.command()
def list_envs(ctx: typer.Context):
    """List all conda environments"""
    conda: Conda = ctx.obj
    typer.echo("Listing Conda environments...")
    try:
        environments = conda.list_environments()
    except CondaError as err:
        _fail(conda, err)

    presenter.print_environments(environments)


@app.command()
def list_packages(
    ctx: typer.Context,
    env_name: Annotated[str, typer.Argument(
        help="name of the environment"
    )],
    format: Annotated[SupportedOutputFormats, typer.Option(
        "--format", "-f",
        help="output format"
    )] = SupportedOutputFormats.TABLE,
):
    """List the packages installed in an environment"""
    conda: Conda = ctx.obj
    # keep yaml and json output free of anything but the data
    if format == SupportedOutputFormats.TABLE:
        typer.echo(f"Listing packages for environment: {env_name}")
    try:
        packages = conda.list_packages(env_name)
    except CondaError as err:
        _fail(conda, err)

    presenter.print_packages(packages, format)
