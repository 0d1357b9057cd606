import logging

import pytest

from core.engine import RoundEngine
from core.session import Session, Status
from settings import MAX_TIME_S

from conftest import wrong_index


def test_new_engine_is_idle(engine):
    session = engine.current_session()
    assert session.status is Status.IDLE
    assert session.score == 0
    assert session.level == 0
    assert session.time_left == MAX_TIME_S
    assert session.round is None
    assert session.grid_size == 5


def test_start_resets_everything(engine):
    session = engine.start()
    assert session.status is Status.PLAYING
    assert session.score == 0
    assert session.time_left == MAX_TIME_S
    assert session.level == 0
    assert session.round is not None


def test_correct_pick_scores_and_advances(playing):
    playing.tick(10.0)
    before = playing.current_session()

    after = playing.select(before.round.target_index)

    assert after.status is Status.PLAYING
    assert after.score == before.score + 1
    assert after.time_left == pytest.approx(before.time_left + 2)
    assert after.level == before.level + 1
    assert after.round is not before.round


def test_bonus_time_is_capped(playing):
    session = playing.select(playing.current_session().round.target_index)
    assert session.time_left == MAX_TIME_S

    playing.tick(1.0)
    session = playing.select(session.round.target_index)
    assert session.time_left == MAX_TIME_S


def test_wrong_pick_costs_time_only(playing):
    before = playing.current_session()
    after = playing.select(wrong_index(playing))

    assert after.time_left == pytest.approx(before.time_left - 3)
    assert after.score == before.score
    assert after.level == before.level
    assert after.round == before.round
    assert after.status is Status.PLAYING


def test_penalty_floors_at_zero(playing):
    playing.tick(28.0)
    session = playing.select(wrong_index(playing))
    assert session.time_left == 0.0
    assert session.status is Status.PLAYING

    session = playing.tick(0.1)
    assert session.status is Status.GAMEOVER
    assert session.time_left == 0.0


@pytest.mark.parametrize("index", [-1, 25, 1000, 2.0, "3", None, True])
def test_out_of_range_pick_is_wrong(playing, index):
    before = playing.current_session()
    after = playing.select(index)
    assert after.score == before.score
    assert after.round == before.round
    assert after.time_left == pytest.approx(before.time_left - 3)


def test_bool_never_matches_target(playing):
    # force cell 1 as target
    while playing.current_session().round.target_index != 1:
        playing.start()
    session = playing.select(True)
    assert session.score == 0


def test_select_ignored_unless_playing(engine):
    assert engine.select(0) == engine.current_session()

    engine.start()
    engine.tick(MAX_TIME_S)
    frozen = engine.current_session()
    assert engine.select(frozen.round.target_index) == frozen

    engine.show_idle()
    idle = engine.current_session()
    assert engine.select(idle.round.target_index) == idle


def test_tick_counts_down(playing):
    session = playing.tick(0.1)
    assert session.time_left == pytest.approx(MAX_TIME_S - 0.1)
    assert session.status is Status.PLAYING


@pytest.mark.parametrize("delta", [0, 0.0, -1.0])
def test_non_positive_tick_is_noop(playing, delta):
    before = playing.current_session()
    assert playing.tick(delta) == before


def test_tick_ignored_unless_playing(engine):
    assert engine.tick(1.0).time_left == MAX_TIME_S
    engine.start()
    engine.show_idle()
    assert engine.tick(1.0).time_left == MAX_TIME_S


def test_ticks_run_down_to_exact_zero(playing):
    playing.tick(MAX_TIME_S - 0.25)
    assert playing.current_session().time_left == pytest.approx(0.25)

    statuses = []
    while playing.current_session().status is Status.PLAYING:
        session = playing.tick(0.1)
        statuses.append(session.status)
        assert session.time_left >= 0

    assert statuses[:-1] == [Status.PLAYING] * (len(statuses) - 1)
    assert statuses[-1] is Status.GAMEOVER
    assert 2 <= len(statuses) <= 3
    assert playing.current_session().time_left == 0.0


def test_single_large_tick_ends_game(engine):
    engine.start()
    session = engine.tick(30.0)
    assert session.status is Status.GAMEOVER
    assert session.time_left == 0.0


def test_gameover_is_frozen(playing):
    over = playing.tick(40.0)
    assert playing.tick(1.0) == over
    assert playing.select(0) == over


def test_five_correct_in_a_row(engine):
    engine.start()
    for _ in range(5):
        engine.select(engine.current_session().round.target_index)

    session = engine.current_session()
    assert session.score == 5
    assert session.level == 5
    assert session.status is Status.PLAYING


def test_show_idle_is_idempotent(playing):
    playing.select(playing.current_session().round.target_index)
    playing.select(playing.current_session().round.target_index)
    playing.tick(3.0)
    before = playing.current_session()

    first = playing.show_idle()
    second = playing.show_idle()

    for session in (first, second):
        assert session.status is Status.IDLE
        assert session.score == before.score
        assert session.level == before.level
        assert session.time_left == before.time_left
        assert session.round == before.round


def test_start_after_gameover_and_idle(playing):
    playing.select(playing.current_session().round.target_index)
    playing.tick(100.0)

    session = playing.start()
    assert session.status is Status.PLAYING
    assert session.score == 0
    assert session.level == 0

    playing.show_idle()
    assert playing.start().status is Status.PLAYING


def test_snapshots_are_not_mutated(playing):
    snapshot = playing.current_session()
    playing.tick(1.0)
    playing.select(wrong_index(playing))
    assert snapshot.time_left == MAX_TIME_S


def test_default_generator_is_created():
    engine = RoundEngine()
    assert 0 <= engine.start().round.target_index < 25


def test_accuracy():
    assert Session().accuracy() == 0


def test_accuracy_after_game(engine):
    engine.start()
    for _ in range(3):
        engine.select(engine.current_session().round.target_index)
        engine.select(wrong_index(engine))
    session = engine.tick(MAX_TIME_S)
    # wrong picks never enter the denominator
    assert session.accuracy() == 100


def test_accuracy_rounds_half_up(generator):
    rnd = generator.generate(8)
    assert Session(status=Status.GAMEOVER, score=1, round=rnd).accuracy() == 13
    rnd = generator.generate(3)
    assert Session(status=Status.GAMEOVER, score=2, round=rnd).accuracy() == 67


def test_new_rounds_are_logged_as_css(playing, caplog):
    caplog.set_level(logging.DEBUG, logger="core.engine")
    session = playing.select(playing.current_session().round.target_index)
    assert session.round.base_color.to_css() in caplog.text
    assert f"cell {session.round.target_index}" in caplog.text
