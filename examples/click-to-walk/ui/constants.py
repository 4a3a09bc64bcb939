"""Layout and timing constants for the click-to-walk demo."""
from __future__ import annotations

MAP_W = 10
MAP_H = 10
TILE_SIZE = 48

GRID_W = MAP_W * TILE_SIZE
GRID_H = MAP_H * TILE_SIZE
STATUS_H = 32

SCREEN_W = GRID_W
SCREEN_H = GRID_H + STATUS_H

FPS = 60
