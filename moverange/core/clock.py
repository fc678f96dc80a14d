# moverange/core/clock.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from moverange import settings

@dataclass
class FixedClock:
    """Fixed timestep accumulator clock for the board window.
    tick() -> (steps, alpha):
    - steps: fixed updates to run this frame (0..max_steps)
    - alpha: leftover fraction of a step, [0,1)
    """
    fixed_dt: float = settings.FIXED_DT
    max_steps: int = settings.MAX_STEPS
    dt_clamp: float = settings.DT_CLAMP
    accumulator: float = 0.0

    def __post_init__(self) -> None:
        self._clock = pygame.time.Clock()

    def advance(self, dt: float) -> tuple[int, float]:
        self.accumulator += min(dt, self.dt_clamp)

        steps = 0
        while self.accumulator >= self.fixed_dt and steps < self.max_steps:
            self.accumulator -= self.fixed_dt
            steps += 1

        alpha = self.accumulator / self.fixed_dt if self.fixed_dt > 0 else 0.0
        return steps, alpha

    def tick(self) -> tuple[int, float]:
        # real elapsed time since last tick, in seconds
        return self.advance(self._clock.tick() / 1000.0)
