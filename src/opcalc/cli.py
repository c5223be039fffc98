"""Command line demonstration driver for the calculators."""

import json
import logging
import math
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from opcalc.calculator import Calculator, Operands, basic_calculator, scientific_calculator
from opcalc.config import Config
from opcalc.errors import OperationNotSupportedError
from opcalc.models import CalculationResult

logger = logging.getLogger(__name__)

# (calculator variant, operation, value1, value2)
DEMO_CALLS: list[tuple[str, str, float, float]] = [
    ("basic", "add", 10, 20),
    ("basic", "multiply", 5, 6),
    ("basic", "divide", 15, 3),
    ("basic", "divide", 1, 0),
    ("scientific", "sin", math.pi / 2, 0),
    ("scientific", "cos", 0, 0),
    ("scientific", "tan", math.pi / 4, 0),
    ("scientific", "unknown_op", 1, 2),
]


def build_calculators() -> dict[str, Calculator]:
    """Construct one calculator of each variant."""
    return {"basic": basic_calculator(), "scientific": scientific_calculator()}


def run_calculation(
    calculators: dict[str, Calculator], variant: str, operation: str, value1: Any, value2: Any
) -> CalculationResult:
    """Run one operation, recording invalid operands or an unsupported operation as an error result."""
    calculator = calculators[variant]
    try:
        operands = Operands(value1=value1, value2=value2)
    except ValidationError as e:
        logger.warning(f"Invalid operands for {operation}: {e}")
        return CalculationResult(calculator=variant, operation=operation, error=str(e))

    try:
        result = calculator.execute_operation(operation, operands)
    except OperationNotSupportedError as e:
        logger.warning(str(e))
        return CalculationResult(
            calculator=variant,
            operation=operation,
            value1=operands.value1,
            value2=operands.value2,
            error=str(e),
        )
    return CalculationResult(
        calculator=variant,
        operation=operation,
        value1=operands.value1,
        value2=operands.value2,
        result=result,
    )


def run_demo() -> list[CalculationResult]:
    """Run every demo call against freshly built calculators."""
    calculators = build_calculators()
    return [run_calculation(calculators, *call) for call in DEMO_CALLS]


def output_results(results: list[CalculationResult], format: str) -> None:
    """Output results in the specified format."""
    if format == "json":
        click.echo(json.dumps([r.model_dump() for r in results], indent=2))
    elif format == "raw":
        for r in results:
            if r.ok:
                click.echo(f"{r.calculator} {r.operation}({r.value1}, {r.value2}) = {r.result}")
            else:
                click.echo(f"{r.calculator} {r.operation}({r.value1}, {r.value2}): {r.error}")
    elif format == "table":
        table = Table(title="Calculator demo")
        table.add_column("calculator", style="dim")
        table.add_column("operation", style="cyan")
        table.add_column("value1")
        table.add_column("value2")
        table.add_column("result")
        for r in results:
            outcome = str(r.result) if r.ok else f"[red]{r.error}[/red]"
            table.add_row(r.calculator, r.operation, str(r.value1), str(r.value2), outcome)
        Console().print(table)


@click.group()
@click.pass_context
def cli(ctx):
    """Basic and scientific calculator demo."""
    config = Config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
    ctx.obj = config


@cli.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "raw", "table"]),
    default=None,
    help="Output format",
)
@click.pass_obj
def demo(config: Config, output_format: str | None):
    """Run sample operations on both calculators."""
    output_results(run_demo(), output_format or config.output_format)


@cli.command()
@click.option(
    "--variant",
    type=click.Choice(["basic", "scientific"]),
    default=None,
    help="Calculator variant to describe",
)
@click.pass_obj
def operations(config: Config, variant: str | None):
    """List the operations a calculator supports."""
    variant = variant or config.default_variant
    calculator = build_calculators()[variant]

    table = Table(title=f"{variant} calculator operations")
    table.add_column("operation", style="cyan")
    table.add_column("operands")
    table.add_column("description")
    table.add_column("parameters")
    for op_desc in calculator.registry.functions:
        parameters = "\n".join(f"{name}: {doc}" for name, doc in op_desc.parameters.items())
        table.add_row(op_desc.name, str(op_desc.arity), op_desc.description, parameters)
    Console().print(table)


def main():
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
