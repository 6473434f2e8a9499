"""Command line demo runner for the design patterns catalog."""

import asyncio
from pathlib import Path
from typing import Optional

import click
import structlog

from .catalog import PATTERNS, PatternEntry, by_category, find_pattern
from .config import RunnerConfig, load_config
from .errors import ConfigurationError, PatternNotFoundError
from .log_config import configure_logging
from .metrics import metrics

logger = structlog.get_logger(__name__)

RULE = "=" * 60


def run_pattern(entry: PatternEntry) -> bool:
    """Run one demo to completion.

    Args:
        entry: Pattern to demonstrate

    Returns:
        True if the demo finished, False if it raised
    """
    try:
        asyncio.run(entry.demo())
    except Exception as e:
        logger.error("pattern_demo_failed", pattern=entry.name, error=str(e))
        click.echo(f"❌ Error running {entry.name} demo: {e}", err=True)
        return False
    return True


def print_metrics() -> None:
    """Print notification counters in a human-readable format."""
    click.echo("\nNotification Metrics:")
    click.echo("-" * 50)
    for name, value in sorted(metrics.snapshot().items()):
        click.echo(f"{name:<60} {value:>10.0f}")


def print_summary() -> None:
    click.echo("\n📊 Demo Summary")
    click.echo("===============")
    for category, entries in by_category().items():
        click.echo(f"✅ {category} Patterns: {len(entries)} implemented")
        for entry in entries:
            click.echo(f"   - {entry.name} ✓")
        click.echo()
    click.echo(f"🎯 Total: {len(PATTERNS)}/23 Gang of Four patterns implemented")
    click.echo("💡 Each pattern includes multiple real-world examples and use cases")


@click.group()
@click.option(
    "--config", "-c", type=click.Path(exists=True, path_type=Path), help="Path to config file"
)
@click.option("--log-level", help="Override the configured log level")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], log_level: Optional[str]) -> None:
    """Design Patterns demo runner."""
    try:
        cfg = load_config(config)
        if log_level:
            cfg = RunnerConfig.from_dict({**cfg.__dict__, "log_level": log_level})
    except ConfigurationError as e:
        raise click.BadParameter(str(e)) from e

    configure_logging(cfg)
    ctx.obj = cfg


@cli.command()
@click.argument("pattern", required=False)
@click.option("--no-pause", is_flag=True, help="Do not wait for Enter between patterns")
@click.option("--show-metrics", is_flag=True, help="Print notification counters afterwards")
@click.pass_obj
def run(config: RunnerConfig, pattern: Optional[str], no_pause: bool, show_metrics: bool) -> None:
    """Run all pattern demos, or only PATTERN (e.g. factory-method)."""
    if pattern:
        try:
            entry = find_pattern(pattern)
        except PatternNotFoundError as e:
            click.echo(f"❌ {e}", err=True)
            click.echo("\nAvailable patterns:")
            for available in PATTERNS:
                click.echo(f"  - {available.command}")
            raise click.exceptions.Exit(1)

        click.echo(f"Running {entry.name} pattern demo...\n")
        if run_pattern(entry):
            click.echo(f"\n✅ {entry.name} demo completed!")
    else:
        click.echo("🚀 Design Patterns Demo Runner")
        click.echo("==============================\n")
        click.echo("Running all implemented patterns...\n")

        pause = config.pause_between_patterns and not no_pause
        for index, entry in enumerate(PATTERNS, start=1):
            click.echo(f"\n{RULE}")
            click.echo(f"📋 Pattern {index}/{len(PATTERNS)}: {entry.name} ({entry.category})")
            click.echo(RULE)
            run_pattern(entry)
            if pause and index < len(PATTERNS):
                click.pause("\n⏸️  Press any key to continue to next pattern...")

        click.echo("\n🎉 All pattern demonstrations completed!")
        print_summary()

    if show_metrics or config.show_metrics:
        print_metrics()


@cli.command(name="list")
def list_patterns() -> None:
    """List all available patterns."""
    click.echo("📋 Available Design Patterns:\n")
    for category, entries in by_category().items():
        click.echo(f"{category} Patterns:")
        for entry in entries:
            click.echo(f"  ✓ {entry.name} ({entry.command})")
        click.echo()


@cli.command()
def interactive() -> None:
    """Pick patterns to run from a menu."""
    click.echo("🎮 Interactive Mode\n")
    while True:
        click.echo("Select a pattern to run:\n")
        for index, entry in enumerate(PATTERNS, start=1):
            click.echo(f"{index}. {entry.name} ({entry.category})")
        click.echo("0. Exit\n")

        choice = click.prompt(f"Enter your choice (0-{len(PATTERNS)})", type=int)
        if choice == 0:
            break
        if not 1 <= choice <= len(PATTERNS):
            click.echo("❌ Invalid choice. Please try again.\n")
            continue

        entry = PATTERNS[choice - 1]
        click.echo(f"\nRunning {entry.name} pattern...\n")
        if run_pattern(entry):
            click.echo(f"\n✅ {entry.name} demo completed!")

        if not click.confirm("\nWould you like to run another pattern?", default=False):
            break
        click.echo()

    click.echo("👋 Goodbye!")


@cli.command()
def summary() -> None:
    """Show which patterns are implemented."""
    print_summary()


if __name__ == "__main__":
    cli()
