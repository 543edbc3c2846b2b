"""
Game Loop - Text-driven play of one game against the engine.

The loop owns everything the engine does not:
1. Prompting for a link rule and a movie title
2. Measuring how long the player took
3. Reporting a timeout when the turn limit is exceeded
4. Switching turns after a valid move

Input, output and the clock are injectable so the loop can be
driven by scripted input.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, TYPE_CHECKING

from loguru import logger

from ..engine_core import LINK_RULES, MoveOutcome, link_rule_for

if TYPE_CHECKING:
    from ..engine_core import GameEngine, LinkRule


RULE_CHOICES: list[str] = list(LINK_RULES)


class LoopState(Enum):
    """State of the game loop; readable by input_fn while a prompt is open."""
    WAITING_RULE = "waiting_rule"
    WAITING_TITLE = "waiting_title"
    GAME_OVER = "game_over"


@dataclass
class LoopSummary:
    """How a game driven by the loop ended."""
    winner: str | None
    rounds: int
    moves: int
    unplayable: bool = False
    messages: list[str] = field(default_factory=list)


class GameLoop:
    """
    Runs one game on the terminal (or any line-based I/O).

    Usage:
        loop = GameLoop(engine, turn_time_limit=30)
        summary = loop.run()
    """

    def __init__(
        self,
        engine: GameEngine,
        turn_time_limit: float = 30.0,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.engine = engine
        self.turn_time_limit = turn_time_limit
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.clock = clock
        self.state = LoopState.WAITING_RULE
        self._messages: list[str] = []

    def run(self) -> LoopSummary:
        """Start a new game and play it to the end."""
        seed = self.engine.start_new_game()
        if seed is None:
            self.state = LoopState.GAME_OVER
            self._say("The game cannot be played: the movie catalog is empty.")
            return self._summary()

        self._say(f"Starting movie: {seed}")
        self._say(f"Win condition: {self.engine.win_condition_description}")

        while not self.engine.is_game_over:
            self.play_turn()

        self.state = LoopState.GAME_OVER
        winner = self.engine.winner
        self._say(f"Game over! {winner.name if winner else 'Nobody'} wins.")
        return self._summary()

    def play_turn(self):
        """Prompt the current player for one move and apply it."""
        engine = self.engine
        player = engine.current_player
        started = self.clock()

        self._say(
            f"\nRound {engine.round_number} - {player.name}'s turn "
            f"({engine.player_progress(player)})"
        )
        self._say(f"Last movie: {engine.last_played_movie}")

        self.state = LoopState.WAITING_RULE
        rule = self._prompt_rule(started)
        if rule is None:
            return
        engine.set_active_link_rule(rule)

        self.state = LoopState.WAITING_TITLE
        while True:
            title = self._ask("Movie title: ", started)
            if title is None:
                return
            result = engine.submit_move(title)
            if result.outcome != MoveOutcome.EMPTY_INPUT:
                break
            self._say("Please enter a movie title.")

        self._say(result.message)
        if result.outcome == MoveOutcome.VALID:
            self._say(f"  ({result.justification})")
            engine.switch_turn()

    def _prompt_rule(self, started: float) -> LinkRule | None:
        options = ", ".join(f"{i}) {name}" for i, name in enumerate(RULE_CHOICES, 1))
        while True:
            choice = self._ask(f"Link by [{options}]: ", started)
            if choice is None:
                return None
            choice = choice.strip()
            if choice.isdigit() and 1 <= int(choice) <= len(RULE_CHOICES):
                return LINK_RULES[RULE_CHOICES[int(choice) - 1]]
            try:
                return link_rule_for(choice)
            except ValueError:
                self._say(f"Unknown link rule: {choice!r}")

    def _ask(self, prompt: str, started: float) -> str | None:
        """
        Read one answer for the current turn.

        Returns None when the turn is lost instead: the answer came too
        late, or input closed before one arrived.
        """
        try:
            answer = self.input_fn(prompt)
        except EOFError:
            waiting_for = "link rule" if self.state == LoopState.WAITING_RULE else "movie title"
            player = self.engine.current_player
            logger.info(f"[GameLoop] Input closed while waiting for {player.name}'s {waiting_for}")
            winner = self.engine.report_timeout()
            self._say(f"\nNo {waiting_for} from {player.name}. {winner.name} wins!")
            return None
        if self._timed_out(started):
            return None
        return answer

    def _timed_out(self, started: float) -> bool:
        elapsed = self.clock() - started
        if elapsed <= self.turn_time_limit:
            return False
        player = self.engine.current_player
        logger.info(f"[GameLoop] {player.name} took {elapsed:.1f}s (limit {self.turn_time_limit}s)")
        winner = self.engine.report_timeout()
        self._say(f"Time's up! {player.name} took too long. {winner.name} wins!")
        return True

    def _say(self, message: str):
        self._messages.append(message)
        self.output_fn(message)

    def _summary(self) -> LoopSummary:
        winner = self.engine.winner
        return LoopSummary(
            winner=winner.name if winner else None,
            rounds=self.engine.round_number,
            moves=self.engine.moves_made,
            unplayable=self.engine.is_unplayable,
            messages=list(self._messages),
        )
