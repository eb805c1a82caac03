# src/arena/cli/app.py
from pathlib import Path
from typing import Optional

import typer
import yaml

from arena.config.defaults import default_scenario
from arena.config.errors import ConfigError
from arena.config.loader import load_config
from arena.config.models import ScenarioConfig
from arena.core.scenario import run_scenario
from arena.logging.log import init_logging


app = typer.Typer(help="Arena observer demo CLI")


def _resolve_config(config: Optional[Path]) -> ScenarioConfig:
    if config is None:
        return default_scenario()
    try:
        return load_config(config)
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def run(
    config: Optional[Path] = typer.Option(
        None, "--config", "-f", help="Scenario YAML (defaults to the built-in scenario)"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Also write a full DEBUG trace into this directory"
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Show DEBUG messages on the console"
    ),
):
    """
    Build the gamer and its observers, broadcast once, then dump the gamer's state.
    """
    cfg = _resolve_config(config)
    logger, run_id, log_path = init_logging(log_dir=log_dir, verbose=debug)

    state = run_scenario(cfg)

    logger.debug(f"run {run_id} finished: health={state.health}")
    typer.echo(yaml.safe_dump(state.model_dump(), sort_keys=False, allow_unicode=True), nl=False)


@app.command("show-config")
def show_config(
    config: Optional[Path] = typer.Option(
        None, "--config", "-f", help="Scenario YAML (defaults to the built-in scenario)"
    ),
):
    """Print the resolved scenario."""
    cfg = _resolve_config(config)
    typer.echo(yaml.safe_dump(cfg.model_dump(), sort_keys=False, allow_unicode=True), nl=False)


def main():
    app()


if __name__ == "__main__":
    main()
