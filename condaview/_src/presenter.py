from typing import List

import rich
import typer
import yaml
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table

from condaview._src.constants import SupportedOutputFormats
from condaview._src.models.environment import EnvironmentList
from condaview._src.models.package import CondaPackage, PackageList


PACKAGE_COLUMNS = ["Name", "Version", "Channel"]


def environment_lines(environments: EnvironmentList) -> List[str]:
    """Numbered lines, one per environment, starting at 1"""
    return [
        f"{i}. {name} ({path})"
        for i, (name, path) in enumerate(zip(environments.names(), environments.envs), start=1)
    ]


def print_environments(environments: EnvironmentList) -> None:
    typer.echo("\nAvailable Conda environments:")
    typer.echo("-------------------------------")
    for line in environment_lines(environments):
        typer.echo(line)
    typer.echo(f"\nTotal environments: {len(environments)}")


def package_table(packages: List[CondaPackage]) -> Table:
    table = Table()
    for column in PACKAGE_COLUMNS:
        table.add_column(column, justify="left", overflow="fold")

    for pkg in packages:
        table.add_row(pkg.name, pkg.version, pkg.channel)

    return table


def _table_width(packages: List[CondaPackage]) -> int:
    widths = [cell_len(column) for column in PACKAGE_COLUMNS]
    for pkg in packages:
        for i, value in enumerate((pkg.name, pkg.version, pkg.channel)):
            widths[i] = max(widths[i], cell_len(value))
    # one space of padding each side of a cell, plus the borders
    return sum(widths) + 3 * len(widths) + 1


def print_packages(
    packages: List[CondaPackage],
    format: SupportedOutputFormats = SupportedOutputFormats.TABLE,
) -> None:
    """Print packages in the order conda returned them.

    yaml and json output carry no trailing count so they can be piped
    into other tools.
    """
    if format == SupportedOutputFormats.YAML:
        typer.echo(yaml.dump([pkg.model_dump() for pkg in packages], sort_keys=False), nl=False)
    elif format == SupportedOutputFormats.JSON:
        typer.echo(PackageList.dump_json(packages, indent=2).decode())
    else:
        # never narrower than the widest row, so no cell is cut short
        width = max(rich.get_console().width, _table_width(packages))
        Console(width=width).print(package_table(packages))
        typer.echo(f"\nTotal packages: {len(packages)}")
