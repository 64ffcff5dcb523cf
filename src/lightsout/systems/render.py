from __future__ import annotations

from typing import Any

from esper import World

from lightsout.constants import CELL_PADDING
from lightsout.events.bus import EVENT_LIGHTS_TOGGLED, EVENT_NEW_GAME_STARTED, EVENT_TICK, EventBus
from lightsout.rendering.board_renderer import BoardRenderer
from lightsout.rendering.context import RenderContext, build_render_context
from lightsout.rendering.control_panel_renderer import ControlPanelRenderer

# Seconds the outline around freshly toggled cells takes to fade.
FLASH_DURATION = 0.3


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, *, headless: bool = False):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        # Forced headless mode skips importing arcade entirely and only builds layout caches.
        self.headless = headless
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_LIGHTS_TOGGLED, self.on_lights_toggled)
        self.event_bus.subscribe(EVENT_NEW_GAME_STARTED, self.on_new_game_started)
        self.flash_positions: set[tuple[int, int]] = set()
        self._flash_remaining = 0.0
        self._render_ctx: RenderContext | None = None
        self._last_cell_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self._last_control_layout: list[dict[str, Any]] = []
        self._last_status_text = ""
        self._board_renderer = BoardRenderer(self, padding=CELL_PADDING)
        self._control_panel_renderer = ControlPanelRenderer(self)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            dt = 1/60
        if self._flash_remaining > 0.0:
            self._flash_remaining = max(0.0, self._flash_remaining - dt)
            if self._flash_remaining == 0.0:
                self.flash_positions = set()

    def on_lights_toggled(self, sender, **kwargs):
        positions = kwargs.get('positions') or []
        self.flash_positions = {tuple(pos) for pos in positions}
        self._flash_remaining = FLASH_DURATION

    def on_new_game_started(self, sender, **kwargs):
        self.flash_positions = set()
        self._flash_remaining = 0.0

    def flash_alpha(self) -> int:
        if self._flash_remaining <= 0.0:
            return 0
        return int(255 * self._flash_remaining / FLASH_DURATION)

    def process(self):
        arcade = None
        headless = self.headless
        if not headless:
            # Local import keeps headless use free of arcade.
            import arcade
            try:
                arcade.get_window()
            except RuntimeError:
                headless = True
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        self._render_ctx = ctx
        self._board_renderer.render(arcade, ctx, headless=headless)
        self._control_panel_renderer.render(arcade, ctx, headless=headless)

    def get_cell_layout(self, row: int, col: int) -> dict[str, Any] | None:
        return self._last_cell_layout.get((row, col))

    @property
    def status_text(self) -> str:
        return self._last_status_text

    @property
    def control_layout(self) -> list[dict[str, Any]]:
        return list(self._last_control_layout)
