from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import load_config_or_exit
from .log import LogSettings, LogSink
from .runner import Coiner

logger = logging.getLogger("coiner.service")
app = typer.Typer(help="Load the coiner configuration and start the runner.")

DEFAULT_CONFIG = Path("configs/coiner.toml")


@app.command()
def run(
    config_path: Path = typer.Option(DEFAULT_CONFIG, "--config", "-c", envvar="COINER_CONFIG", help="Path to config TOML."),
    coin: str = typer.Option("BTC", "--coin", help="Coin to run."),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to logs/<name>.log instead of the console."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Start the runner once the configuration has loaded."""

    settings = LogSettings(verbose=verbose, log_to_file=log_file is not None, log_file=log_file)
    with LogSink(settings):
        cfg = load_config_or_exit(config_path)
        coiner = Coiner.from_config(cfg, run_coin=coin, log_file=log_file or "")
        coiner.run(cfg)
        logger.info("Runner finished.")


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
