"""Click to Walk — route an agent across a random grid with pygame.

Left-click a cell to walk there, R to regenerate the grid, H to switch
between the classic and admissible search policies.
"""
from __future__ import annotations

import dataclasses
import logging
import sys

import pygame

from tick_nav import (
    GridBuilder,
    InvalidEndpoint,
    NavConfig,
    SearchConfig,
    Walker,
    configure_logging,
)

from ui.constants import SCREEN_W, SCREEN_H, MAP_W, MAP_H, TILE_SIZE, FPS
from ui.renderer import draw_agent, draw_grid, draw_route, draw_status

CLASSIC = SearchConfig()
ADMISSIBLE = SearchConfig.admissible()


class GameState:
    """Holds the grid provider, the walker and the status line."""

    def __init__(self, seed: int = 42) -> None:
        self.config = NavConfig(grid_size=MAP_W)
        self.builder = GridBuilder(self.config, seed=seed)
        start = (0, 0)
        self.grid = self.builder.build(MAP_W, MAP_H, keep_clear=[start])
        self.walker = Walker(self.grid, start, self.config)
        self.message = "Click a cell to walk. R: new grid  H: heuristic"
        self.color = (200, 200, 200)

    def notify(self, message: str, color: tuple[int, int, int] = (200, 200, 200)) -> None:
        self.message = message
        self.color = color

    def regenerate(self) -> None:
        self.grid = self.builder.regenerate(keep_clear=[self.walker.position])
        self.walker.set_grid(self.grid)
        self.notify(f"New grid, {len(self.grid.obstacles())} obstacles")

    def toggle_search(self) -> None:
        admissible = self.config.search == CLASSIC
        search = ADMISSIBLE if admissible else CLASSIC
        self.config = dataclasses.replace(self.config, search=search)
        self.walker = Walker(self.grid, self.walker.position, self.config)
        self.notify("Search: admissible" if admissible else "Search: classic")

    def click(self, col: int, row: int) -> None:
        try:
            reachable = self.walker.move_to((col, row))
        except InvalidEndpoint:
            self.notify(f"({col}, {row}) is blocked", (255, 80, 80))
            return
        if reachable:
            steps = len(self.walker.remaining)
            self.notify(f"Walking to ({col}, {row}), {steps} steps", (100, 255, 100))
        else:
            self.notify(f"No route to ({col}, {row})", (255, 180, 80))


def main() -> None:
    configure_logging(logging.DEBUG if "-v" in sys.argv else logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Click to Walk")
    clock = pygame.time.Clock()

    state = GameState()
    font = pygame.font.SysFont("monospace", 14)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    state.regenerate()
                elif event.key == pygame.K_h:
                    state.toggle_search()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos[0] // TILE_SIZE, event.pos[1] // TILE_SIZE
                if 0 <= mx < MAP_W and 0 <= my < MAP_H:
                    state.click(mx, my)

        state.walker.update(dt)

        screen.fill((20, 20, 30))
        draw_grid(screen, state.grid)
        draw_route(screen, state.walker)
        draw_agent(screen, state.walker)
        draw_status(screen, font, state.message, state.color)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
