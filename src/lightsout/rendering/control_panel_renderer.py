"""Draws the control strip and the status line."""
from __future__ import annotations

from typing import TYPE_CHECKING

from lightsout.constants import STATUS_FONT_SIZE, STATUS_TEXT_COLOR

if TYPE_CHECKING:
    from lightsout.rendering.context import RenderContext
    from lightsout.systems.render import RenderSystem


class ControlPanelRenderer:
    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        rs._last_control_layout = []
        for button, rect in ctx.controls:
            rs._last_control_layout.append(
                {"action": button.action, "label": button.label, "enabled": button.enabled, "rect": rect}
            )
            if headless:
                continue
            left, bottom, width, height = rect
            fill_color = arcade.color.DARK_SLATE_BLUE if button.enabled else arcade.color.GRAY_BLUE
            outline_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            text_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill_color)
            arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, outline_color, border_width=2)
            arcade.draw_text(
                button.label,
                left + width / 2,
                bottom + height / 2,
                text_color,
                16,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

        rs._last_status_text = ctx.status_text
        if headless or not ctx.status_text:
            return
        x, y = ctx.status_position
        arcade.draw_text(
            ctx.status_text,
            x,
            y,
            STATUS_TEXT_COLOR,
            STATUS_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
        )
