"""
Tests for the line-based game loop.

The loop is driven with scripted input and a fake clock.
"""

import pytest

from ..engine_core import EmptyTitlePolicy, WinConditionKind
from ..session import GameLoop, LoopState


class FakeClock:
    """Time only moves when scripted input says so."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def scripted(clock, answers):
    """
    Build an input function from (answer, seconds_taken) pairs.

    Plain strings take one second.
    """
    queue = [a if isinstance(a, tuple) else (a, 1.0) for a in answers]

    def _input(prompt):
        answer, seconds = queue.pop(0)
        clock.now += seconds
        return answer
    return _input


@pytest.fixture
def clock():
    return FakeClock()


def make_loop(engine, clock, answers, limit=30.0):
    output = []
    loop = GameLoop(
        engine,
        turn_time_limit=limit,
        input_fn=scripted(clock, answers),
        output_fn=output.append,
        clock=clock,
    )
    return loop, output


class TestGameLoop:

    def test_play_to_win(self, make_engine, clock):
        """Alice opens, Bob links to a Mystery and wins."""
        engine = make_engine("Jaws", WinConditionKind.GENRE, "Mystery")
        loop, output = make_loop(engine, clock, [
            "1", "The Dark Knight",
            "actor", "The Prestige",
        ])

        summary = loop.run()

        assert summary.winner == "Bob"
        assert summary.moves == 2
        assert loop.state == LoopState.GAME_OVER
        assert any("Shared Actor" in line or "winning link" in line for line in output)

    def test_timeout(self, make_engine, clock):
        engine = make_engine("Jaws", WinConditionKind.GENRE, "Mystery")
        loop, output = make_loop(engine, clock, [
            "1", ("Inception", 31.0),
        ])

        summary = loop.run()

        assert summary.winner == "Bob"
        assert engine.moves_made == 0
        assert any("Time's up" in line for line in output)

    def test_unknown_rule_reprompts(self, make_engine, clock):
        engine = make_engine("Jaws", WinConditionKind.GENRE, "Mystery")
        loop, output = make_loop(engine, clock, [
            "stunt double", "9", "director", "Plan 9 from Outer Space",
        ])

        summary = loop.run()

        assert summary.winner == "Bob"
        assert any("Unknown link rule" in line for line in output)

    def test_empty_title_reprompts_under_signal_policy(self, make_engine, clock):
        engine = make_engine("Jaws", WinConditionKind.YEAR, 2010, policy=EmptyTitlePolicy.SIGNAL)
        loop, output = make_loop(engine, clock, [
            "actor", "", "Inception",
        ])

        summary = loop.run()

        assert summary.winner == "Alice"
        assert any("Please enter a movie title" in line for line in output)

    def test_empty_title_forfeits_by_default(self, make_engine, clock):
        engine = make_engine("Jaws", WinConditionKind.YEAR, 2010)
        loop, _ = make_loop(engine, clock, ["actor", ""])

        summary = loop.run()

        assert summary.winner == "Bob"

    def test_unplayable(self, make_engine, clock):
        engine = make_engine(movies=[])
        loop, output = make_loop(engine, clock, [])

        summary = loop.run()

        assert summary.unplayable
        assert summary.winner is None
        assert "cannot be played" in output[0]

    def test_closed_input_loses_the_turn(self, make_engine, clock):
        engine = make_engine("Jaws", WinConditionKind.GENRE, "Mystery")

        def _closed(prompt):
            raise EOFError

        loop = GameLoop(engine, input_fn=_closed, output_fn=lambda line: None, clock=clock)
        summary = loop.run()

        assert summary.winner == "Bob"
        assert summary.moves == 0
        assert any("No link rule from Alice" in line for line in summary.messages)

    def test_input_closed_while_waiting_for_title(self, make_engine, clock):
        engine = make_engine("Jaws", WinConditionKind.GENRE, "Mystery")
        answers = ["director"]

        def _input(prompt):
            if not answers:
                raise EOFError
            return answers.pop(0)

        loop = GameLoop(engine, input_fn=_input, output_fn=lambda line: None, clock=clock)
        summary = loop.run()

        assert summary.winner == "Bob"
        assert any("No movie title from Alice" in line for line in summary.messages)

    def test_state_follows_the_prompt(self, make_engine, clock):
        engine = make_engine("Jaws", WinConditionKind.YEAR, 2010)
        seen = []
        answers = {"Link": "actor", "Movie": "Inception"}

        def _input(prompt):
            seen.append(loop.state)
            return answers[prompt.split()[0]]

        loop = GameLoop(engine, input_fn=_input, output_fn=lambda line: None, clock=clock)
        loop.run()

        assert seen == [LoopState.WAITING_RULE, LoopState.WAITING_TITLE]
        assert loop.state == LoopState.GAME_OVER
