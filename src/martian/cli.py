"""Martian robots command-line interface."""

import sys
from typing import BinaryIO, NoReturn, Optional

import rich_click as click
from rich.console import Console
from rich.text import Text

from martian.config import MissionConfig
from martian.display import check_outcomes, format_outcome, iter_plan, print_checks
from martian.generator import Generator
from martian.mission import Mission
from martian.parser import MissionOutcomes, MissionPlan, ParseError


def _fail(message: str) -> NoReturn:
    Console(stderr=True).print(Text(message, style="bold red"), soft_wrap=True)
    sys.exit(1)


def _make_generator(seed: Optional[int]) -> Generator:
    try:
        return Generator(seed, MissionConfig.from_env())
    except ValueError as e:
        raise click.UsageError(str(e))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="martian-robots")
def main() -> None:
    """Martian Robots: robots on a bounded grid that learn from the lost."""
    pass


@main.command("run")
@click.option("--input", "input_file", type=click.File("rb"), default="-",
              help="Mission plan to read (default: standard input)")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Print a summary of the mission on standard error")
def run(input_file: BinaryIO, verbose: bool) -> None:
    """Dispatch every robot of a mission plan and print its outcome.

    Outcomes are printed as soon as each robot's commands have been read.
    """
    try:
        plan = MissionPlan.read(input_file)
    except ParseError as e:
        _fail(str(e))

    mission = Mission(plan.upper_right)
    dispatched = 0
    lost = 0
    error: Optional[ParseError] = None
    try:
        for robot, commands in plan:
            outcome = mission.dispatch(robot, commands)
            dispatched += 1
            if outcome.is_lost:
                lost += 1
            click.echo(format_outcome(outcome))
    except ParseError as e:
        error = e

    if verbose:
        Console(stderr=True).print(
            f"Dispatched {dispatched} robots on a {plan.upper_right.x}x{plan.upper_right.y} grid, {lost} lost",
            soft_wrap=True,
        )
    if error is not None:
        _fail(str(error))


@main.command("generate")
@click.option("-n", "--limit", type=click.IntRange(min=0), default=None,
              help="Number of robots to generate (default: endless)")
@click.option("--seed", type=click.IntRange(min=0), default=None,
              help="Generator seed (default: $MARTIAN_SEED or 12345)")
def generate(limit: Optional[int], seed: Optional[int]) -> None:
    """Print a pseudo-random mission plan."""
    generator = _make_generator(seed)
    stream = iter(generator) if limit is None else generator.take(limit)
    for piece in iter_plan(generator.upper_right, stream):
        click.echo(piece, nl=False)


@main.command("check")
@click.option("-n", "--limit", type=click.IntRange(min=0), required=True,
              help="Number of generated robots the outcome log covers")
@click.option("--seed", type=click.IntRange(min=0), default=None,
              help="Generator seed (default: $MARTIAN_SEED or 12345)")
@click.option("--input", "input_file", type=click.File("rb"), default="-",
              help="Outcome log to verify (default: standard input)")
def check(limit: int, seed: Optional[int], input_file: BinaryIO) -> None:
    """Verify an outcome log against the generated mission.

    Run `martian generate` with the same seed and limit to produce the plan
    the log should answer.
    """
    generator = _make_generator(seed)
    expected = Mission.run(generator.upper_right, generator.take(limit))
    checks = check_outcomes(expected, MissionOutcomes.read(input_file))
    try:
        mismatches = print_checks(checks, Console())
    except ParseError as e:
        _fail(str(e))
    if mismatches:
        _fail(f"{mismatches} outcome(s) did not match")


@main.command("outcomes")
@click.option("--input", "input_file", type=click.File("rb"), default="-",
              help="Outcome log to read (default: standard input)")
def outcomes(input_file: BinaryIO) -> None:
    """Re-print an outcome log in normalized form."""
    try:
        for outcome in MissionOutcomes.read(input_file):
            click.echo(format_outcome(outcome))
    except ParseError as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
