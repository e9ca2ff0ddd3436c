# tests/test_game_loop.py
import random
from gridsnake.core.interfaces import Command, CommandKind, Food, FoodKind, RunPhase, UP, LEFT
from gridsnake.core.snake_state import SnakeState

SMALL = FoodKind.SMALL


def _place(loop, cells, direction=(20, 0), foods=()):
    loop.state.snake = SnakeState.from_cells(list(cells), 20, direction)
    loop.state.spawner.live = list(foods)


def test_construction_renders_idle_board(loop_factory):
    loop, sched, rend = loop_factory()
    assert loop.phase is RunPhase.IDLE
    assert rend.calls == 1
    snap = rend.last
    assert snap.snake == ((100, 100),)
    assert snap.score == 0
    assert len(snap.foods) == 1
    assert sched.active == 0

def test_eating_grows_scores_and_respawns(loop_factory):
    loop, sched, rend = loop_factory()
    _place(loop, [(100, 100)], foods=[Food(SMALL, (120, 100))])
    loop.start()
    assert sched.advance(450) == 1
    snap = rend.last
    assert snap.snake == ((120, 100), (100, 100))
    assert snap.score == 1
    assert len(snap.foods) == 1
    assert snap.foods[0].cell not in snap.snake
    assert snap.tick == 1

def test_reverse_rejected_then_self_collision(loop_factory):
    overs = []
    loop, sched, rend = loop_factory(on_game_over=overs.append)
    _place(loop, [(0, 0), (20, 0)], foods=[Food(SMALL, (200, 200))])
    loop.start()
    loop.propose((-20, 0))
    assert loop.state.snake.direction == (20, 0)
    sched.advance(450)
    assert loop.phase is RunPhase.OVER
    assert len(overs) == 1
    assert overs[0].reason == "self"
    assert overs[0].phase is RunPhase.OVER
    # the losing move is not applied
    assert overs[0].snake == ((0, 0), (20, 0))
    assert sched.active == 0
    # no more ticks once over
    sched.advance(5000)
    assert len(overs) == 1

def test_wall_collision(loop_factory):
    overs = []
    loop, sched, _ = loop_factory(on_game_over=overs.append)
    _place(loop, [(280, 100)], foods=[Food(SMALL, (0, 0))])
    loop.start()
    sched.advance(450)
    assert loop.phase is RunPhase.OVER
    assert overs[0].reason == "wall"

def test_check_collision_bounds_and_body(loop_factory):
    loop, _, _ = loop_factory()
    _place(loop, [(100, 100), (80, 100), (80, 120)])
    assert loop.check_collision((-20, 100)) == "wall"
    assert loop.check_collision((100, 300)) == "wall"
    assert loop.check_collision((80, 120)) == "self"
    assert loop.check_collision((120, 100)) is None
    assert loop.check_collision((280, 0)) is None

def test_start_only_from_idle(loop_factory):
    loop, sched, _ = loop_factory()
    loop.start()
    loop.start()
    assert sched.scheduled == 1
    assert sched.active == 1

def test_pause_suspends_and_resume_restarts_interval(loop_factory):
    loop, sched, _ = loop_factory()
    _place(loop, [(0, 140)], foods=[Food(SMALL, (0, 0))])
    loop.start()
    sched.advance(300)
    loop.toggle_pause()
    assert loop.phase is RunPhase.PAUSED
    assert sched.active == 0
    assert sched.advance(2000) == 0
    loop.toggle_pause()
    assert loop.phase is RunPhase.RUNNING
    # partial progress before the pause is dropped: full interval again
    assert sched.advance(449) == 0
    assert sched.advance(1) == 1
    assert loop.state.tick == 1

def test_pause_is_noop_from_idle_and_over(loop_factory):
    loop, sched, rend = loop_factory()
    loop.toggle_pause()
    assert loop.phase is RunPhase.IDLE
    _place(loop, [(280, 0)])
    loop.start()
    sched.advance(450)
    assert loop.phase is RunPhase.OVER
    loop.toggle_pause()
    loop.start()
    assert loop.phase is RunPhase.OVER
    assert sched.active == 0

def test_stop_resets_from_any_phase(loop_factory):
    loop, sched, rend = loop_factory()
    loop.stop()
    assert loop.phase is RunPhase.IDLE
    _place(loop, [(100, 100)], foods=[Food(SMALL, (120, 100))])
    loop.start()
    sched.advance(450)
    assert loop.state.score == 1
    loop.stop()
    loop.stop()
    snap = rend.last
    assert snap.phase is RunPhase.IDLE
    assert snap.score == 0
    assert snap.snake == ((100, 100),)
    assert snap.direction == (20, 0)
    assert len(snap.foods) == 1
    assert sched.active == 0
    loop.start()
    assert loop.phase is RunPhase.RUNNING

def test_stop_after_game_over_returns_to_idle(loop_factory):
    loop, sched, _ = loop_factory()
    _place(loop, [(280, 0)])
    loop.start()
    sched.advance(450)
    loop.stop()
    assert loop.phase is RunPhase.IDLE
    assert loop.state.reason is None

def test_set_speed_while_running_reschedules_once(loop_factory):
    loop, sched, _ = loop_factory()
    _place(loop, [(0, 140)], foods=[Food(SMALL, (0, 0))])
    loop.start()
    assert sched.advance(200) == 0
    before = sched.scheduled
    loop.set_speed(170)
    assert sched.scheduled == before + 1
    assert sched.active == 1
    assert sched.advance(169) == 0
    assert sched.advance(1) == 1
    assert sched.advance(169) == 0
    assert sched.advance(1) == 1
    assert loop.state.tick == 2

def test_set_speed_while_paused_applies_on_resume(loop_factory):
    loop, sched, _ = loop_factory()
    _place(loop, [(0, 140)], foods=[Food(SMALL, (0, 0))])
    loop.start()
    loop.toggle_pause()
    before = sched.scheduled
    loop.set_speed(220)
    assert sched.scheduled == before
    loop.toggle_pause()
    assert sched.advance(220) == 1

def test_set_speed_ignores_bad_values(loop_factory):
    loop, _, _ = loop_factory()
    loop.set_speed(0)
    loop.set_speed("fast")
    loop.set_speed(float("inf"))
    loop.set_speed(float("nan"))
    assert loop.interval_ms == 450

def test_difficulty_names(loop_factory):
    loop, _, _ = loop_factory()
    loop.set_difficulty("hard")
    assert loop.interval_ms == 220
    loop.set_difficulty("nightmare")
    assert loop.interval_ms == 220
    loop.set_difficulty("very-hard")
    assert loop.interval_ms == 170

def test_handle_dispatches_commands(loop_factory):
    loop, sched, _ = loop_factory()
    _place(loop, [(100, 100)], foods=[Food(SMALL, (0, 0))])
    loop.handle(Command(CommandKind.START))
    assert loop.phase is RunPhase.RUNNING
    loop.handle(Command(CommandKind.DIRECTION, UP))
    loop.handle(Command(CommandKind.DIFFICULTY, "medium"))
    assert loop.interval_ms == 350
    sched.advance(350)
    assert loop.state.snake.head == (100, 80)
    loop.handle(Command(CommandKind.PAUSE))
    assert loop.phase is RunPhase.PAUSED
    loop.handle(Command(CommandKind.STOP))
    assert loop.phase is RunPhase.IDLE

def test_handle_ignores_malformed(loop_factory):
    loop, _, _ = loop_factory()
    loop.start()
    loop.handle(None)
    loop.handle("start")
    loop.handle(Command(CommandKind.DIRECTION, "sideways"))
    loop.handle(Command(CommandKind.DIFFICULTY, None))
    loop.handle(Command(CommandKind.DIFFICULTY, ["hard"]))
    loop.handle(Command(CommandKind.DIFFICULTY, {"hard": 1}))
    loop.handle(Command(CommandKind.QUIT))
    assert loop.phase is RunPhase.RUNNING
    assert loop.state.snake.pending is None
    assert loop.interval_ms == 450

def test_render_once_per_tick(loop_factory):
    loop, sched, rend = loop_factory()
    _place(loop, [(0, 140)], foods=[Food(SMALL, (0, 0))])
    loop.start()
    calls = rend.calls
    sched.advance(450 * 3)
    assert rend.calls == calls + 3
    assert [f.tick for f in rend.frames[-3:]] == [1, 2, 3]

def test_tiered_batch_refills_only_when_exhausted(loop_factory):
    loop, sched, _ = loop_factory(food_policy="tiered")
    _place(loop, [(100, 100)], foods=[Food(SMALL, (120, 100)), Food(FoodKind.LARGE, (200, 200))])
    loop.start()
    sched.advance(450)
    assert loop.state.score == 1
    assert loop.state.spawner.live == [Food(FoodKind.LARGE, (200, 200))]

def test_random_play_keeps_length_and_score_rules(loop_factory):
    rng = random.Random(11)
    for policy in ("single", "tiered"):
        loop, sched, rend = loop_factory(food_policy=policy)
        games = 0
        while games < 20:
            loop.stop()
            loop.start()
            while loop.phase is RunPhase.RUNNING:
                if rng.random() < 0.3:
                    loop.propose(rng.choice([UP, LEFT, (0, 1), (1, 0)]))
                before = loop.snapshot()
                sched.step()
                after = loop.snapshot()
                if after.phase is RunPhase.OVER:
                    assert after.snake == before.snake
                    assert after.score == before.score
                    break
                grew = len(after.snake) - len(before.snake)
                assert grew in (0, 1)
                eaten = [f for f in before.foods if f.cell == after.snake[0]]
                if grew:
                    assert len(eaten) == 1
                    assert after.score - before.score == eaten[0].points
                else:
                    assert not eaten
                    assert after.score == before.score
                assert 1 <= len(after.foods) <= 2
                assert not set(f.cell for f in after.foods) & set(after.snake[1:])
            games += 1

def test_close_cancels_timer(loop_factory):
    loop, sched, _ = loop_factory()
    loop.start()
    loop.close()
    assert sched.active == 0
    assert loop.phase is RunPhase.IDLE
