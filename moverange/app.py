# moverange/app.py
from __future__ import annotations
import random
import pygame
from moverange import settings
from moverange.core.clock import FixedClock
from moverange.scenes.board import BoardScene
from moverange.session import RangeSession
from moverange.world.grid import build_grid

def run(session: RangeSession) -> None:
    pygame.init()
    pygame.display.set_caption(settings.WINDOW_TITLE)
    size = session.grid.size * settings.TILE_SIZE + settings.BOARD_MARGIN * 2
    screen = pygame.display.set_mode((size, size))
    clock = FixedClock()

    scene = BoardScene(screen, session)

    running = True
    while running:
        # -- Input --
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                scene.handle_event(event)

        # -- Fixed updates --
        steps, alpha = clock.tick()
        for _ in range(steps):
            scene.update(settings.FIXED_DT)

        # -- Render --
        scene.draw(screen, alpha)
        pygame.display.flip()

    pygame.quit()

def main() -> None:
    rng = random.Random(settings.RNG_SEED) if settings.RNG_SEED is not None else random.Random()
    grid = build_grid(settings.GRID_SIZE, settings.SHADED_DENSITY, rng)
    run(RangeSession(grid, settings.MAX_MOVEMENT_POINTS))
