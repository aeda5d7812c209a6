"""`maclaurin-sweep` command: run one sweep and print the error summary."""

from __future__ import annotations

import json
import logging

import click

from maclaurin.analysis.config import DEFAULT_LOWER, DEFAULT_UPPER
from maclaurin.analysis.sweep import SweepAnalyzer
from maclaurin.core.contracts import validate_sweep_request, validate_sweep_result
from maclaurin.presentation.charts import SweepChartView
from maclaurin.presentation.formatting import StatsCard


@click.command("maclaurin-sweep")
@click.option(
    "--degree",
    default="9",
    show_default=True,
    help="Truncation degree of the series (invalid values fall back to 9).",
)
@click.option(
    "--step",
    default="0.01",
    show_default=True,
    help="Sampling step (invalid values fall back to 0.01).",
)
@click.option("--lower", type=float, default=DEFAULT_LOWER, show_default=True)
@click.option("--upper", type=float, default=DEFAULT_UPPER, show_default=True)
@click.option("--json", "json_output", is_flag=True, default=False, help="Emit JSON output.")
@click.option(
    "--plot",
    "plot_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the approximation and error charts to this image file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def sweep_command(
    degree: str,
    step: str,
    lower: float,
    upper: float,
    json_output: bool,
    plot_path: str | None,
    verbose: bool,
) -> None:
    """Compare e^x with its Maclaurin polynomial over [LOWER, UPPER]."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    analyzer = SweepAnalyzer()
    request = analyzer.normalize(
        {"lower": lower, "upper": upper, "step": step, "degree": degree}
    )
    result = analyzer.run(request)

    if plot_path is not None:
        view = SweepChartView()
        view.render(result)
        view.save(plot_path)

    if json_output:
        validate_sweep_request(request.to_contract())
        payload = result.to_contract()
        validate_sweep_result(payload)
        click.echo(json.dumps(payload, allow_nan=False))
        return

    click.echo(f"Degree: {result.degree}")
    for line in StatsCard.from_result(result).lines():
        click.echo(line)
    click.echo(f"Samples: {result.sample_count}")
    if request.substituted_fields:
        click.echo(f"Fallback applied: {', '.join(request.substituted_fields)}")


def main() -> None:
    sweep_command()


if __name__ == "__main__":
    main()
