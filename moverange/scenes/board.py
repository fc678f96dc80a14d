# moverange/scenes/board.py
from __future__ import annotations
import logging
import pygame
from dataclasses import dataclass, field
from typing import Optional

from moverange import settings
from moverange.entities.token import Token
from moverange.errors import InvalidOriginError
from moverange.session import RangeSession
from moverange.world.grid import Grid

logger = logging.getLogger(__name__)

Coord = tuple[int, int]


@dataclass(slots=True)
class BoardLayout:
    """Pixel math for the board. Row 0 is drawn at the bottom."""
    size: int
    tile_size: int = settings.TILE_SIZE
    margin: int = settings.BOARD_MARGIN

    def to_px(self, col: float, row: float) -> tuple[int, int]:
        x = self.margin + col * self.tile_size
        y = self.margin + (self.size - 1 - row) * self.tile_size
        return int(x), int(y)

    def center_px(self, col: float, row: float) -> tuple[int, int]:
        x, y = self.to_px(col, row)
        half = self.tile_size // 2
        return x + half, y + half

    def from_px(self, x: int, y: int) -> Coord:
        col = (x - self.margin) // self.tile_size
        row = self.size - 1 - (y - self.margin) // self.tile_size
        return int(col), int(row)

    def tile_rect(self, col: int, row: int) -> pygame.Rect:
        x, y = self.to_px(col, row)
        return pygame.Rect(x, y, self.tile_size, self.tile_size)


@dataclass
class BoardScene:
    """
    Movement-range board:
    - cells drawn blocked (*), open (-), reachable (cost) or agent (X)
    - LMB on a reachable cell moves the agent there along its stored path
    - hovering a reachable cell previews that path
    """
    screen: pygame.Surface
    session: RangeSession
    token: Token = field(init=False)
    layout: BoardLayout = field(init=False)
    _last_rejected: Optional[Coord] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.session.started:
            self.session.start()
        col, row = self.session.origin  # type: ignore[misc]
        self.token = Token(col, row)
        self.layout = BoardLayout(self.grid.size)
        self._font = pygame.font.Font(None, settings.HUD_FONT_SIZE)
        self._label_font = pygame.font.Font(None, settings.LABEL_FONT_SIZE)

    @property
    def grid(self) -> Grid:
        return self.session.grid

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not self.token.is_moving():
            self.click(self.layout.from_px(*event.pos))

    def click(self, coord: Coord) -> bool:
        """Try to move the agent to coord. Returns False when the move is rejected."""
        path = self.session.path_to(coord)
        try:
            self.session.set_origin(coord)
        except InvalidOriginError as exc:
            logger.warning("Invalid cell! %s", exc)
            self._last_rejected = coord
            return False
        self._last_rejected = None
        if path is not None:
            self.token.start_move(path.moves)
        return True

    # ---- Fixed update ----
    def update(self, dt: float) -> None:
        self.token.update(dt)

    # ---- Render ----
    def draw(self, surface: pygame.Surface, alpha: float = 0.0) -> None:
        surface.fill(settings.BG_COLOR)
        show_range = not self.token.is_moving()

        for col, row in self.grid.coords():
            color, text = self._cell_look((col, row), show_range)
            rect = self.layout.tile_rect(col, row)
            pygame.draw.rect(surface, color, rect)
            pygame.draw.rect(surface, settings.GRID_COLOR, rect, width=1)
            label = self._label_font.render(text, True, settings.LABEL_RGB)
            surface.blit(label, label.get_rect(center=rect.center))

        if show_range:
            self._draw_hover_path(surface)
        else:
            self._draw_token(surface)

        self._draw_highlight(surface)
        self._draw_hud(surface)

    def _cell_look(self, coord: Coord, show_range: bool) -> tuple[tuple[int, int, int], str]:
        if self.grid.is_blocked(*coord):
            return settings.SHADED_CELL_COLOR, settings.SHADED_CELL_TEXT
        if show_range:
            if coord == self.session.origin:
                return settings.PLAYER_CELL_COLOR, settings.PLAYER_CELL_TEXT
            path = self.session.path_to(coord)
            if path is not None:
                return settings.VALID_CELL_COLOR, str(path.cost)
        return settings.EMPTY_CELL_COLOR, settings.EMPTY_CELL_TEXT

    def _hovered(self) -> Coord:
        return self.layout.from_px(*pygame.mouse.get_pos())

    def _draw_token(self, surface: pygame.Surface) -> None:
        cx, cy = self.layout.center_px(*self.token.position())
        pygame.draw.circle(surface, settings.TOKEN_COLOR, (cx, cy), max(6, self.layout.tile_size // 3))

    def _draw_hover_path(self, surface: pygame.Surface) -> None:
        target = self._hovered()
        path = self.session.path_to(target)
        if path is None:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        steps = [self.session.origin, *path.moves]
        pts = [self.layout.center_px(c, r) for c, r in steps]  # type: ignore[misc]
        if len(pts) >= 2:
            pygame.draw.lines(overlay, settings.PATH_RGBA, False, pts, width=6)
        pygame.draw.rect(overlay, settings.PATH_RGBA, self.layout.tile_rect(*target), width=3)
        surface.blit(overlay, (0, 0))

    def _draw_highlight(self, surface: pygame.Surface) -> None:
        col, row = self._hovered()
        if not self.grid.in_bounds(col, row):
            return
        pygame.draw.rect(surface, settings.GRID_HILITE, self.layout.tile_rect(col, row), width=2)

    # ---- HUD ----
    def _draw_hud(self, surface: pygame.Surface) -> None:
        pieces = [
            f"Origin: {self.session.origin}",
            f"Budget: {self.session.budget}",
            f"Reachable: {len(self.session.reachable)}",
        ]
        if not self.token.is_moving():
            cost = self.session.cost_to(self._hovered())
            if cost is not None:
                pieces.append(f"Hover: {cost} moves")
        if self._last_rejected is not None:
            pieces.append(f"Invalid cell {self._last_rejected}")

        text = "  |  ".join(pieces)
        pad = 6
        surf_text = self._font.render(text, True, settings.HUD_TEXT_RGB)
        w, h = surf_text.get_size()
        pill = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        pill.fill(settings.HUD_BG_RGBA)
        pill.blit(surf_text, (pad, pad))
        surface.blit(pill, (10, 10))
