# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    CANVAS_SIZE, GRID_SIZE, HEADER_HEIGHT,
    TEXT, GAME_OVER_RED, THEMES, THEME_BG,
    Color,
)
from .game import Snapshot
from .lifecycle import CollisionCause, RoundStatus

WINDOW_SIZE = (CANVAS_SIZE, CANVAS_SIZE + HEADER_HEIGHT)
THEME_NAMES = tuple(THEMES)


def next_theme(theme: str) -> str:
    i = THEME_NAMES.index(theme)
    return THEME_NAMES[(i + 1) % len(THEME_NAMES)]


def palette(snap: Snapshot, theme: str) -> Tuple[Color, Color]:
    """(snake, food) colors; a self collision paints the snake red."""
    snake, _glow, food = THEMES[theme]
    if snap.status is RoundStatus.GAME_OVER and snap.collision_cause is CollisionCause.SELF:
        snake = GAME_OVER_RED
    return snake, food


def overlay_text(snap: Snapshot) -> str:
    if snap.status is RoundStatus.GAME_OVER:
        return "GAME OVER"
    if snap.status is RoundStatus.NOT_STARTED:
        return "Press Arrow to Start"
    if snap.status is RoundStatus.PAUSED:
        return "PAUSED"
    return ""


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Color) -> None:
    rect = pygame.Rect(gx * GRID_SIZE, HEADER_HEIGHT + gy * GRID_SIZE, GRID_SIZE - 2, GRID_SIZE - 2)
    pygame.draw.rect(screen, color, rect)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, theme: str) -> None:
    snake_color, food_color = palette(snap, theme)
    screen.fill(THEME_BG[theme])

    # header
    score = font.render(f"Score: {snap.score}", True, TEXT)
    best = font.render(f"Best: {snap.best_score}", True, TEXT)
    screen.blit(score, (8, 10))
    screen.blit(best, best.get_rect(topright=(CANVAS_SIZE - 8, 10)))
    pygame.draw.line(screen, TEXT, (0, HEADER_HEIGHT - 1), (CANVAS_SIZE, HEADER_HEIGHT - 1))

    for x, y in snap.snake:
        draw_cell(screen, x, y, snake_color)
    draw_cell(screen, snap.food.x, snap.food.y, food_color)

    if snap.collision_cause is CollisionCause.WALL:
        board = pygame.Rect(0, HEADER_HEIGHT, CANVAS_SIZE, CANVAS_SIZE)
        pygame.draw.rect(screen, GAME_OVER_RED, board, width=3)

    text = overlay_text(snap)
    if text:
        draw_overlay(screen, font, text, GAME_OVER_RED if snap.status is RoundStatus.GAME_OVER else TEXT)


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, text: str, color: Color) -> None:
    # Dim the board with a translucent layer
    overlay = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, HEADER_HEIGHT))

    center = (CANVAS_SIZE // 2, HEADER_HEIGHT + CANVAS_SIZE // 2)
    title = font.render(text, True, color)
    screen.blit(title, title.get_rect(center=center))
