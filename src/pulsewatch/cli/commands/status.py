import typer

from pulsewatch.monitor import alerts
from pulsewatch.utilities.env import Configuration


def status_command(
    bpm: int = typer.Option(..., "--bpm", help="Latest heart-rate reading"),
    threshold: int | None = typer.Option(None, "--threshold", help="Alert threshold"),
    alerts_enabled: bool | None = typer.Option(
        None, "--alerts/--no-alerts", help="Whether threshold alerts are on"
    ),
) -> None:
    try:
        resolved_threshold = (
            alerts.clamp_threshold(threshold)
            if threshold is not None
            else Configuration.alert_threshold()
        )
        enabled = (
            alerts_enabled if alerts_enabled is not None else Configuration.alerts_enabled()
        )
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    result = alerts.status(bpm, resolved_threshold, enabled)
    typer.echo(f"{result.severity.upper()}: {result.text}")
    typer.echo(alerts.notice(bpm, resolved_threshold, enabled))
