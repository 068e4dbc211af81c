"""
Latency simulation module.

This module simulates the variable response time of an external service.
The simulator is an async callable awaited once per classified record; it
carries no data and never affects the outcome of a record.
"""

import asyncio
import logging
import random

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class LatencySettings(BaseModel):
    """
    Bounds of the simulated latency, in milliseconds (inclusive).

    Attributes
    ----------
    min_ms : int
        Shortest delay, by default 300.
    max_ms : int
        Longest delay, by default 2000.
    """

    model_config = ConfigDict(frozen=True)

    min_ms: int = Field(default=300, ge=0)
    max_ms: int = Field(default=2000, ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "LatencySettings":
        if self.min_ms > self.max_ms:
            raise ValueError(f"min_ms ({self.min_ms}) must not exceed max_ms ({self.max_ms})")
        return self


class RandomLatency:
    """
    Uniformly distributed delay over integer milliseconds.

    Parameters
    ----------
    settings : LatencySettings | None
        Delay bounds, defaults to 300-2000 ms.
    rng : random.Random | None
        Random generator, injectable for reproducible draws.
    """

    def __init__(self, settings: LatencySettings | None = None, rng: random.Random | None = None) -> None:
        self.settings = settings or LatencySettings()
        self.rng = rng or random.Random()

    def next_delay_ms(self) -> int:
        return self.rng.randint(self.settings.min_ms, self.settings.max_ms)

    async def __call__(self) -> None:
        delay_ms = self.next_delay_ms()
        logger.debug(f"Simulating {delay_ms} ms of external latency")
        await asyncio.sleep(delay_ms / 1000)
