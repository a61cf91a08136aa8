from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import AppConfig

logger = logging.getLogger("coiner.runner")

DEFAULT_MAX_THREADS = 8


@dataclass
class Coiner:
    run_coin: str
    log_file: str = ""
    max_threads: int = DEFAULT_MAX_THREADS

    @classmethod
    def from_config(cls, config: AppConfig, run_coin: str, log_file: str = "") -> "Coiner":
        return cls(run_coin=run_coin, log_file=log_file, max_threads=config.max_threads)

    def run(self, config: AppConfig) -> None:
        node = config.node
        logger.info("Starting %s for %s with %d threads", config.name, self.run_coin, self.max_threads)
        logger.info("Node %s://%s as %s", node.protocol, node.host, node.user)
        logger.debug(
            "request_timeout=%s slow_threshold=%s",
            config.request_timeout.literal,
            config.slow_threshold.literal,
        )
