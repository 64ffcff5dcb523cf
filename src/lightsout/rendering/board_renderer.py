from __future__ import annotations

from typing import TYPE_CHECKING

from lightsout.constants import LIGHT_OFF_COLOR, LIGHT_ON_COLOR, LIGHT_OUTLINE_COLOR

if TYPE_CHECKING:
    from lightsout.rendering.context import RenderContext
    from lightsout.systems.render import RenderSystem

# Outline drawn around cells flipped by the latest toggle.
FLASH_COLOR = (255, 255, 255)


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 6):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        rs._last_cell_layout = {}
        draw_size = max(ctx.cell_size - self._padding, 4)
        inset = (ctx.cell_size - draw_size) / 2
        flash_alpha = rs.flash_alpha()

        for row in range(ctx.rows):
            for col in range(ctx.cols):
                on = ctx.lights[row * ctx.cols + col]
                left, bottom = ctx.cell_origin(row, col)
                left += inset
                bottom += inset
                rs._last_cell_layout[(row, col)] = {
                    "on": on,
                    "rect": (left, bottom, draw_size, draw_size),
                }
                if headless:
                    continue
                color = LIGHT_ON_COLOR if on else LIGHT_OFF_COLOR
                arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, color)
                arcade.draw_lbwh_rectangle_outline(
                    left, bottom, draw_size, draw_size, LIGHT_OUTLINE_COLOR, border_width=2
                )
                if flash_alpha > 0 and (row, col) in rs.flash_positions:
                    r, g, b = FLASH_COLOR
                    arcade.draw_lbwh_rectangle_outline(
                        left, bottom, draw_size, draw_size, (r, g, b, flash_alpha), border_width=3
                    )
