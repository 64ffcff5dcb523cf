import pytest

from lightsout.components.auto_solve_timer import AutoSolveTimer
from lightsout.components.control_button import ControlAction
from lightsout.components.game_state import GameMode
from lightsout.components.light_grid import LightGrid
from lightsout.events.bus import (
    EVENT_AUTO_SOLVE_REQUEST,
    EVENT_BOARD_CHANGED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NEW_GAME_STARTED,
    EVENT_TICK,
)
from lightsout.systems.board_ops import all_lights_out
from lightsout.utils.game_state import get_game_state
from lightsout.world import get_control, get_state_entity
from tests.helpers import build_game, capture, replay_reversed, scripted_moves


@pytest.mark.parametrize("seed", range(10))
def test_generated_puzzle_is_unsolved_and_solvable(seed):
    harness = build_game(seed=seed)
    grid = harness.grid
    assert len(grid.lights) == 9
    assert not all_lights_out(grid)
    assert len(harness.history) == 20

    replay = LightGrid(rows=grid.rows, cols=grid.cols, lights=list(grid.lights))
    replay_reversed(replay, harness.history.moves)
    assert all_lights_out(replay)


def test_new_game_records_start_and_resets_state(game):
    state = get_game_state(game.world)
    assert state.mode == GameMode.PLAYING
    assert state.started_at == game.clock.value
    assert state.solve_seconds is None
    assert get_control(game.world, ControlAction.AUTO_SOLVE).enabled


def test_switching_to_five_by_five_resets_board(game):
    started = capture(game.bus, EVENT_NEW_GAME_STARTED)
    game.bus.emit(EVENT_NEW_GAME_REQUEST, rows=5, cols=5)

    grid = game.grid
    assert (grid.rows, grid.cols) == (5, 5)
    assert len(grid.lights) == 25
    assert not all_lights_out(grid)
    assert len(game.history) == 20
    assert all(0 <= r < 5 and 0 <= c < 5 for r, c in game.history.moves)
    assert started and started[-1]["rows"] == 5


def test_scramble_that_cancels_out_is_regenerated():
    # First scramble presses (1, 1) twice and lands on the solved board.
    rng = scripted_moves([(1, 1), (1, 1), (0, 0), (2, 2)])
    harness = build_game(rng=rng, toggle_count=2, start=False)
    started = capture(harness.bus, EVENT_NEW_GAME_STARTED)

    harness.puzzle.new_game(3, 3)

    assert harness.history.moves == [(0, 0), (2, 2)]
    assert not all_lights_out(harness.grid)
    assert started[-1]["attempts"] == 2


def test_unsupported_size_is_rejected():
    harness = build_game(start=False)
    with pytest.raises(ValueError):
        harness.puzzle.new_game(4, 4)


def test_new_game_emits_board_changed():
    harness = build_game(start=False)
    changes = capture(harness.bus, EVENT_BOARD_CHANGED)
    harness.bus.emit(EVENT_NEW_GAME_REQUEST, rows=3, cols=3)
    assert changes == [{"reason": "new_game"}]


def test_new_game_cancels_running_auto_solve(game):
    game.bus.emit(EVENT_AUTO_SOLVE_REQUEST)
    assert game.world.has_component(get_state_entity(game.world), AutoSolveTimer)
    assert not get_control(game.world, ControlAction.AUTO_SOLVE).enabled

    game.bus.emit(EVENT_NEW_GAME_REQUEST, rows=3, cols=3)

    assert not game.world.has_component(get_state_entity(game.world), AutoSolveTimer)
    assert get_game_state(game.world).mode == GameMode.PLAYING
    assert get_control(game.world, ControlAction.AUTO_SOLVE).enabled
    lights = list(game.grid.lights)
    game.bus.emit(EVENT_TICK, dt=1.0)
    assert game.grid.lights == lights


def test_new_game_clears_win_message(game):
    for row, col in reversed(list(game.history.moves)):
        game.board.click_light(row, col)
    game.render.process()
    assert game.render.status_text.startswith("You win!")
    assert get_game_state(game.world).mode == GameMode.SOLVED

    game.bus.emit(EVENT_NEW_GAME_REQUEST, rows=3, cols=3)
    game.render.process()
    assert game.render.status_text == ""
    assert get_game_state(game.world).solve_seconds is None


def test_missing_payload_is_ignored():
    harness = build_game(start=False)
    harness.bus.emit(EVENT_NEW_GAME_REQUEST, rows=3)
    assert all_lights_out(harness.grid)
    assert len(harness.history) == 0
