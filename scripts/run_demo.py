"""Time a few simulated workloads to show timer output."""

from __future__ import annotations

import time
from pathlib import Path

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig

from codetimer import CodeTimer, configure, timed
from codetimer.utils.logging import logger, loguru_sink, setup_logging


def build_sink(cfg: DictConfig):
    if cfg.sink == "stdout":
        return print
    if cfg.sink == "loguru":
        return loguru_sink(cfg.log_level, component="codetimer")
    raise ValueError(f"Unknown sink {cfg.sink!r}; expected 'stdout' or 'loguru'")


@timed
def warm_up(seconds: float) -> None:
    time.sleep(seconds)


@hydra.main(config_path="../configs", config_name="demo", version_base=None)
def main(cfg: DictConfig) -> None:
    log_file = Path(to_absolute_path(cfg.log_file)) if cfg.log_file else None
    setup_logging(log_file, level=cfg.log_level)

    configure(
        enabled=cfg.timer.enabled,
        use_short_format=cfg.timer.use_short_format,
        log_action=build_sink(cfg),
    )

    warm_up(cfg.warm_up)

    with CodeTimer.create(cfg.name) as timer:
        for step in cfg.steps:
            time.sleep(step.seconds)
            timer.log_step(step.get("label"))

    logger.info("Demo finished")


if __name__ == "__main__":
    main()
