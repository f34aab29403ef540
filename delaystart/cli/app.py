"""
Main CLI application using Typer.
"""

from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import ConfigError, DelayOutOfRange, InfeasibleSchedule, ParseError
from ..domain.formatting import format_clock_time, format_duration
from ..domain.models import DelayPlan
from ..log_setup import init_logging
from ..services.delay_planner import DelayPlannerService, SystemClock

app = typer.Typer(
    name="delaystart",
    help="Work out the delay-start setting that finishes a program on time",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]


def _load_config_or_exit(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ConfigError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def _resolve_duration(config: AppConfig, duration: Optional[str], program: Optional[str]) -> str:
    """
    Pick the duration text from either the argument or a named preset.
    """
    if duration and program:
        console.print("[red]Error: give either a duration or --program, not both.[/red]")
        raise typer.Exit(1)

    if program:
        preset = config.find_preset(program)
        if preset is None:
            console.print(
                f"[red]Error: unknown program '{escape(program)}'.[/red] "
                "Run 'delaystart programs' to list the available ones."
            )
            raise typer.Exit(1)
        return preset.duration

    if not duration:
        console.print("[red]Error: a duration (H:MM) or --program is required.[/red]")
        raise typer.Exit(1)

    return duration


def _render_plan(plan: DelayPlan, config: AppConfig) -> None:
    appliance = config.appliance

    console.print(
        f"\nNow [bold]{format_clock_time(plan.now_minutes)}[/bold], "
        f"program length [bold]{format_duration(plan.duration_minutes)}[/bold]\n"
    )
    console.print(f"[dim]Exact math:[/dim]\n  {plan.exact.format_display()}")
    console.print(
        f"[dim]Closest appliance delay setting:[/dim]\n"
        f"  [bold blue]{plan.appliance.format_display()}[/bold blue]"
    )

    if plan.needs_adjustment:
        drift = plan.finish_drift_minutes
        direction = "later" if drift > 0 else "earlier"
        console.print(
            f"[yellow]Finishes {format_duration(abs(drift))} {direction} than requested.[/yellow]"
        )

    console.print(
        f"[dim](Panel uses {format_duration(appliance.fine_step)} steps up to "
        f"{format_duration(appliance.coarse_threshold)}, then "
        f"{format_duration(appliance.coarse_step)} steps up to "
        f"{format_duration(appliance.max_delay)}.)[/dim]\n"
    )


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Delay-start planner for timed appliance programs.
    """
    init_logging("DEBUG" if verbose else "WARNING")


@app.command()
def plan(
    finish: Annotated[str, typer.Option("--finish", "-f", help="Desired finish time (HH:MM)")],
    duration: Annotated[Optional[str], typer.Argument(help="Program duration as H:MM or whole hours")] = None,
    now: Annotated[Optional[str], typer.Option("--now", "-n", help="Current time (HH:MM). Defaults to the system clock.")] = None,
    program: Annotated[Optional[str], typer.Option("--program", "-p", help="Use the duration of a named program")] = None,
    config_file: ConfigOption = None,
):
    """
    Calculate the delay needed to finish a program at the given time.

    Examples:

        delaystart plan 3:39 --finish 07:00

        delaystart plan --program Cotton --finish 07:00 --now 22:15
    """
    config = _load_config_or_exit(config_file)
    duration_text = _resolve_duration(config, duration, program)

    service = DelayPlannerService(
        clock=SystemClock(config.timezone),
        calculator=config.appliance.build_calculator(),
        quantizer=config.appliance.build_quantizer(),
    )

    try:
        result = service.plan(
            duration_text=duration_text,
            finish_text=finish,
            now_text=now,
        )
    except ParseError as e:
        console.print(
            f"[bold red]Error:[/bold red] Check that all times are filled in as HH:MM "
            f"({escape(str(e))})."
        )
        raise typer.Exit(1)
    except InfeasibleSchedule:
        console.print(
            "[bold red]Error:[/bold red] With that duration you'd have needed to start earlier. "
            "Try a later finish time."
        )
        raise typer.Exit(1)
    except DelayOutOfRange:
        console.print(
            f"[bold red]Error:[/bold red] Delay would be more than "
            f"{format_duration(config.appliance.max_delay)}, which is beyond what the "
            f"appliance supports."
        )
        raise typer.Exit(1)

    _render_plan(result, config)


@app.command()
def quantize(
    delay: Annotated[int, typer.Argument(help="Exact delay in minutes")],
    config_file: ConfigOption = None,
):
    """
    Snap an exact delay to the closest appliance setting.
    """
    config = _load_config_or_exit(config_file)
    snapped = config.appliance.build_quantizer().quantize(delay)
    console.print(f"{delay} min -> [bold]{format_duration(snapped)}[/bold] ({snapped} min)")


@app.command()
def settings(
    config_file: ConfigOption = None,
):
    """
    List every delay the appliance panel can be set to.
    """
    config = _load_config_or_exit(config_file)
    for value in config.appliance.build_quantizer().settings():
        console.print(f"  {format_duration(value):>11}  [dim]({value} min)[/dim]")


@app.command()
def programs(
    config_file: ConfigOption = None,
):
    """
    List the configured program presets.
    """
    config = _load_config_or_exit(config_file)

    if not config.presets:
        console.print("[yellow]No programs defined in the config file.[/yellow]")
        return

    table = Table(
        title="Programs",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name", style="bold yellow")
    table.add_column("Duration")
    table.add_column("Length", style="dim")

    for preset in config.presets:
        table.add_row(
            preset.name,
            preset.duration,
            format_duration(preset.duration_minutes())
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]delaystart[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
