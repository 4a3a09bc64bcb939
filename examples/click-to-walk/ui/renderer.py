"""Grid, route and agent rendering."""
from __future__ import annotations

import pygame

from tick_nav import NavGrid, Walker

from ui.constants import TILE_SIZE, GRID_W, GRID_H, SCREEN_W, STATUS_H

FLOOR = (45, 45, 55)
OBSTACLE = (22, 128, 175)
ROUTE = (240, 200, 80)
AGENT_IDLE = (230, 230, 230)
AGENT_WALK = (120, 230, 120)


def _cell_rect(col: int, row: int, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        col * TILE_SIZE + inset,
        row * TILE_SIZE + inset,
        TILE_SIZE - 2 * inset,
        TILE_SIZE - 2 * inset,
    )


def draw_grid(surface: pygame.Surface, grid: NavGrid) -> None:
    """Draw floor and obstacle cells."""
    for row in grid.rows():
        for cell in row:
            color = OBSTACLE if cell.obstacle else FLOOR
            pygame.draw.rect(surface, color, _cell_rect(cell.col, cell.row))

    for x in range(grid.width + 1):
        pygame.draw.line(surface, (30, 30, 30), (x * TILE_SIZE, 0), (x * TILE_SIZE, GRID_H))
    for y in range(grid.height + 1):
        pygame.draw.line(surface, (30, 30, 30), (0, y * TILE_SIZE), (GRID_W, y * TILE_SIZE))


def draw_route(surface: pygame.Surface, walker: Walker) -> None:
    """Mark remaining route cells and outline the destination."""
    for col, row in walker.remaining:
        pygame.draw.rect(surface, ROUTE, _cell_rect(col, row, inset=TILE_SIZE // 3))
    if walker.destination is not None and not walker.arrived:
        col, row = walker.destination
        pygame.draw.rect(surface, ROUTE, _cell_rect(col, row, inset=2), 2)


def draw_agent(surface: pygame.Surface, walker: Walker) -> None:
    col, row = walker.position
    color = AGENT_WALK if walker.state == "walk" else AGENT_IDLE
    center = (col * TILE_SIZE + TILE_SIZE // 2, row * TILE_SIZE + TILE_SIZE // 2)
    pygame.draw.circle(surface, color, center, TILE_SIZE // 3)


def draw_status(
    surface: pygame.Surface,
    font: pygame.font.Font,
    message: str,
    color: tuple[int, int, int],
) -> None:
    pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, GRID_H, SCREEN_W, STATUS_H))
    if message:
        surface.blit(font.render(message, True, color), (8, GRID_H + 8))
