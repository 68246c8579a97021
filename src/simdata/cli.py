"""Command-line interface for checking and inspecting the simulation documents."""

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from simdata.config.settings import SimdataConfig

app = typer.Typer(
    name="simdata",
    help="Validate and inspect tariff, emissions and simulation parameter documents.",
    no_args_is_help=True,
)

console = Console()


class ShowTarget(str, Enum):
    """Documents the show command can tabulate."""

    TARIFFS = "tariffs"
    EMISSIONS = "emissions"
    SIMULATION_PARAMS = "simulation-params"


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file. Uses the bundled documents if omitted.",
        exists=True,
        dir_okay=False,
    ),
]


def _setup(config: Path | None) -> "SimdataConfig":
    """Load configuration and configure logging from it."""
    import yaml

    from simdata.config.loader import load_config
    from simdata.config.settings import SimdataConfig
    from simdata.utils.logging import configure_logging

    try:
        simdata_config = load_config(config) if config is not None else SimdataConfig()
    except (ValueError, yaml.YAMLError) as e:
        # pydantic's ValidationError is a ValueError
        console.print(f"[red]Invalid configuration {escape(str(config))}:[/red]")
        console.print(str(e), markup=False, highlight=False)
        raise typer.Exit(code=1) from e

    configure_logging(
        level=simdata_config.logging.level,
        json_output=simdata_config.logging.json_output,
    )
    return simdata_config


@app.command()
def validate(config: ConfigOption = None) -> None:
    """Validate every document against its schema."""
    from simdata.validation import ConsoleReporter, ValidationRunner

    simdata_config = _setup(config)
    console.print("[blue]Running document validation...[/blue]")

    results = ValidationRunner(simdata_config).run()
    ConsoleReporter(console).print_results(results)

    if any(not r.valid for r in results):
        raise typer.Exit(code=1)


@app.command()
def show(
    target: Annotated[ShowTarget, typer.Argument(help="Document to display.")],
    config: ConfigOption = None,
) -> None:
    """Load one document and display its records."""
    from simdata.errors import LoadError

    simdata_config = _setup(config)

    try:
        if target is ShowTarget.TARIFFS:
            _show_tariffs(simdata_config)
        elif target is ShowTarget.EMISSIONS:
            _show_emissions(simdata_config)
        else:
            _show_simulation_params(simdata_config)
    except LoadError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1) from e


def _optional(value: object) -> str:
    return "-" if value is None else str(value)


def _show_tariffs(config: "SimdataConfig") -> None:
    from simdata.ingestion import load_tariffs, source_for
    from simdata.schemas.registry import Domain

    tariffs = load_tariffs(source_for(Domain.TARIFFS, config))

    table = Table(title="Tariffs")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Base price", justify="right")
    table.add_column("Energy price", justify="right")
    table.add_column("Power price", justify="right")
    table.add_column("Time ranges", style="dim")

    for tariff in tariffs:
        ranges = ", ".join(
            f"{r.start_hour:g}-{r.end_hour:g} x{r.multiplier:g}"
            for r in tariff.time_ranges or []
        )
        table.add_row(
            tariff.name,
            tariff.type,
            str(tariff.base_price),
            str(tariff.energy_price),
            _optional(tariff.power_price),
            ranges or "-",
        )

    console.print(table)


def _show_emissions(config: "SimdataConfig") -> None:
    from simdata.ingestion import load_emissions_data, source_for
    from simdata.schemas.registry import Domain

    data = load_emissions_data(source_for(Domain.EMISSIONS, config))

    sources = Table(title="Energy sources")
    sources.add_column("Name", style="cyan")
    sources.add_column("Type")
    sources.add_column("CO2/kWh", justify="right")
    sources.add_column("Lifecycle", justify="right")
    sources.add_column("Efficiency %", justify="right")
    for es in data.energy_sources:
        sources.add_row(
            es.name,
            es.type,
            str(es.co2_per_kwh),
            str(es.lifecycle_emissions),
            str(es.conversion_efficiency),
        )

    factors = Table(title="Conversion factors")
    factors.add_column("From", style="cyan")
    factors.add_column("To", style="cyan")
    factors.add_column("Factor", justify="right")
    factors.add_column("Context")
    factors.add_column("Notes", style="dim")
    for factor in data.conversion_factors:
        factors.add_row(
            factor.from_unit,
            factor.to_unit,
            str(factor.factor),
            _optional(factor.context),
            _optional(factor.notes),
        )

    console.print(sources)
    console.print(factors)


def _show_simulation_params(config: "SimdataConfig") -> None:
    from simdata.ingestion import load_simulation_params, source_for
    from simdata.schemas.registry import Domain

    params = load_simulation_params(source_for(Domain.SIMULATION_PARAMS, config))

    table = Table(title="Simulation parameters")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")
    for key, value in params.to_document().items():
        if key == "incentives":
            continue
        table.add_row(key, str(value))
    console.print(table)

    if params.incentives:
        incentives = Table(title="Incentives")
        incentives.add_column("Name", style="cyan")
        incentives.add_column("Type")
        incentives.add_column("Amount", justify="right")
        incentives.add_column("Max limit", justify="right")
        incentives.add_column("Expires", style="dim")
        for incentive in params.incentives:
            incentives.add_row(
                incentive.name,
                incentive.type,
                str(incentive.amount),
                _optional(incentive.max_limit),
                _optional(incentive.expiration_date),
            )
        console.print(incentives)


@app.command()
def version() -> None:
    """Show version information."""
    from simdata import __version__

    console.print(f"simdata version {__version__}")


if __name__ == "__main__":
    app()
