import random
from datetime import datetime, timedelta

import typer
from reactivex.scheduler import HistoricalScheduler

from pulsewatch.runtime.container import build_session_container
from pulsewatch.session.controller import SessionController
from pulsewatch.utilities.env import Configuration
from pulsewatch.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TICKS = 10
DEMO_EMAIL = "demo@pulsewatch.local"
DEMO_PASSWORD = "demo"


def _echo_session(controller: SessionController) -> None:
    typer.echo(f"Active sensor: {controller.state.active_sensor.name}")
    for sample in controller.state.trend:
        typer.echo(f"  {sample.timestamp_label:<14} {sample.bpm:>4} bpm")
    status = controller.alert_status()
    typer.echo(f"Latest: {controller.state.latest_bpm} bpm")
    typer.echo(controller.state.alerts.describe())
    typer.echo(f"Status: {status.text} ({status.severity})")


def simulate_command(
    ticks: int = typer.Option(
        DEFAULT_TICKS, "--ticks", min=0, help="Number of live-feed ticks to run"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for simulated readings"),
    sync: bool = typer.Option(
        False, "--sync/--no-sync", help="Run a device sync before the live feed"
    ),
    refresh: int = typer.Option(
        0, "--refresh", min=0, help="Number of manual refreshes after the feed"
    ),
    threshold: int | None = typer.Option(
        None, "--threshold", help="Alert threshold (clamped to 60-140)"
    ),
) -> None:
    try:
        tick_interval = Configuration.tick_interval_seconds()
        sync_interval = Configuration.sync_step_interval_seconds()
        scheduler = HistoricalScheduler(initial_clock=datetime.now())
        container = build_session_container(
            scheduler=scheduler,
            rng=random.Random(seed),
            clock=lambda: scheduler.now,
        )
        controller = container[SessionController]
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc

    controller.onboarding.log_in(DEMO_EMAIL, DEMO_PASSWORD)
    if threshold is not None:
        controller.set_threshold(threshold)

    if sync:
        controller.start_sync()
        while controller.syncing:
            scheduler.advance_by(timedelta(seconds=sync_interval))
        typer.echo(f"Sync complete: {controller.state.latest_bpm} bpm")

    controller.start_live_feed()
    scheduler.advance_by(timedelta(seconds=tick_interval * ticks))
    controller.stop_live_feed()

    for _ in range(refresh):
        typer.echo(f"Refresh: {controller.refresh()} bpm")

    _echo_session(controller)
    controller.close()
