"""
Simian CLI

Command-line interface for Simian - seedable monkey testing.

Usage:
    simian run --seed 123 --iterations 1000    Dry-run a monkey and summarise its events
    simian sample --seed 0 --count 5           Print raw PRNG output for a seed
    simian config                              Show effective settings
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from simian import __version__
from simian.core.config import Settings, get_settings
from simian.core.errors import MonkeyError
from simian.core.geometry import Rect
from simian.core.models import Preset
from simian.monkey.config import MonkeyConfig
from simian.monkey.rng import PcgRandom
from simian.monkey.session import MonkeySession

# Create the main app
app = typer.Typer(
    name="simian",
    help="Simian - seedable monkey testing for app UIs",
    add_completion=False,
)

# Console for rich output
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# =============================================================================
# Main Commands
# =============================================================================


@app.command()
def run(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed (default: SIMIAN_SEED or clock)"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="Number of ticks"),
    duration: Optional[float] = typer.Option(None, "--duration", "-d", help="Seconds to run for"),
    width: Optional[float] = typer.Option(None, "--width", help="Frame width in points"),
    height: Optional[float] = typer.Option(None, "--height", help="Frame height in points"),
    preset: Optional[Preset] = typer.Option(None, "--preset", "-p", help="Action preset"),
    alert_interval: Optional[int] = typer.Option(None, "--alert-interval", help="Ticks between alert checks (0 disables)"),
) -> None:
    """Dry-run a monkey against a recording actuator.

    Prints how many events of each kind were generated. With a fixed seed
    the output is identical on every run.
    """
    overrides = {
        "seed": seed,
        "iterations": iterations,
        "duration_secs": duration,
        "frame_width": width,
        "frame_height": height,
        "preset": preset,
        "alert_interval": alert_interval,
    }
    try:
        # Command-line options take precedence over SIMIAN_* variables
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
        config = MonkeyConfig.from_env_or_random(settings)
    except (MonkeyError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    if settings.iterations is None and settings.duration_secs is None:
        console.print("[red]Give --iterations or --duration; a dry run cannot run forever.[/red]")
        raise typer.Exit(code=2)

    session = MonkeySession(config).with_preset(
        settings.preset,
        multiple_tap_probability=settings.multiple_tap_probability,
        multiple_touch_probability=settings.multiple_touch_probability,
        long_press_probability=settings.long_press_probability,
    )
    if settings.alert_interval:
        session.with_alert_action(settings.alert_interval)

    with session.run() as env:
        if settings.iterations is not None:
            env.monkey.run(settings.iterations)
        else:
            env.monkey.run_for(settings.duration_secs)
        report = env.report()

    console.print()
    console.print(
        Panel.fit(
            f"[bold blue]Monkey run[/bold blue]\n"
            f"[dim]seed {report.seed} · frame {_format_rect(report.frame)} · {settings.preset.value}[/dim]",
            border_style="blue",
        )
    )

    table = Table(title="Events")
    table.add_column("Kind", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for kind, count in sorted(report.events.items()):
        table.add_row(kind, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{report.events_count}[/bold]")

    console.print(table)
    console.print(
        f"Ticks: {report.ticks}  Random: {report.random_actions_count}  "
        f"Regular: {report.regular_actions_count}  Elapsed: {report.elapsed_secs:.3f}s"
    )
    console.print(f"[dim]Replay with: simian run --seed {report.seed}[/dim]")
    console.print()


@app.command()
def sample(
    seed: int = typer.Option(0, "--seed", "-s", help="Seed"),
    sequence: int = typer.Option(0, "--sequence", help="Stream selector"),
    count: int = typer.Option(5, "--count", "-c", min=1, help="Number of values"),
) -> None:
    """Print raw PRNG output for a seed.

    Useful for checking another implementation against this one.
    """
    try:
        rng = PcgRandom(_seed=seed, _sequence=sequence)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    table = Table(title=f"PCG32 seed={seed} sequence={sequence}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("uint32", justify="right", style="cyan")
    table.add_column("hex", style="green")
    for index in range(count):
        value = rng.next_uint32()
        table.add_row(str(index), str(value), f"0x{value:08x}")

    console.print(table)


@app.command()
def config() -> None:
    """Show effective settings (SIMIAN_* environment and .env)."""
    settings = get_settings()

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in settings.model_dump().items():
        table.add_row(name, "[dim]unset[/dim]" if value is None else str(getattr(value, "value", value)))

    console.print(table)


def _format_rect(rect: Rect) -> str:
    return f"({rect.x:g}, {rect.y:g}, {rect.width:g}, {rect.height:g})"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Simian - seedable monkey testing for app UIs."""
    if version:
        console.print(f"simian {__version__}")
        raise typer.Exit()

    level = (log_level or get_settings().log_level).upper()
    if level not in logging.getLevelNamesMapping():
        console.print(f"[red]Invalid log level: {escape(level)}[/red]")
        raise typer.Exit(code=2)
    _configure_logging(level)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()
