"""
Game Engine - Turn order, move validation and win/loss decisions.

The engine is driven entirely by its caller:
1. start_new_game() seeds the history and picks a win condition
2. Each turn: set_active_link_rule(), then submit_move(title)
3. After a valid move the caller calls switch_turn()
4. The caller enforces the time limit and calls report_timeout()

The engine never blocks, never does I/O and never mutates the catalog.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING

from loguru import logger

from ..catalog import Catalog, CreditRole, Movie
from .history import GameMove
from .link_rules import LinkRule, link_rule_for
from .result import EmptyTitlePolicy, ForfeitReason, MoveResult
from .state import GamePhase, GameState, Player
from .win_rules import DEFAULT_WIN_THRESHOLD, WinCondition, WinConditionKind

if TYPE_CHECKING:
    from ..config import Settings


FIRST_MOVE_JUSTIFICATION = "starts the chain"


class GameEngine:
    """
    Orchestrates one two-player game at a time.

    Usage:
        engine = GameEngine(catalog, Player("Ann"), Player("Bob"))
        engine.start_new_game()

        engine.set_active_link_rule("director")
        result = engine.submit_move("The Prestige")
        if result.accepted and not result.is_terminal:
            engine.switch_turn()
    """

    def __init__(
        self,
        catalog: Catalog,
        player_one: Player,
        player_two: Player,
        rng: random.Random | None = None,
        win_threshold: int = DEFAULT_WIN_THRESHOLD,
        empty_title_policy: EmptyTitlePolicy = EmptyTitlePolicy.FORFEIT,
    ):
        if catalog is None or player_one is None or player_two is None:
            raise ValueError("Catalog and players cannot be None")
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.win_threshold = win_threshold
        self.empty_title_policy = empty_title_policy
        self.state = GameState(current_player=player_one, other_player=player_two)

    @classmethod
    def from_settings(
        cls,
        catalog: Catalog,
        player_one: Player,
        player_two: Player,
        settings: Settings,
    ) -> GameEngine:
        """Build an engine with the configured rules and random seed."""
        return cls(
            catalog,
            player_one,
            player_two,
            rng=random.Random(settings.random_seed),
            win_threshold=settings.win_threshold,
            empty_title_policy=settings.empty_title_policy,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start_new_game(self) -> Movie | None:
        """
        Reset both players and the history, then seed a new game.

        Returns the seed movie, or None if the game cannot be played
        (empty catalog or no derivable win condition).
        """
        self.state.reset()

        titles = sorted(self.catalog.all_titles())
        seed = self.catalog.lookup_by_title(self.rng.choice(titles)) if titles else None
        if seed is None:
            return self._mark_unplayable("No movies available in the catalog to start the game")
        self.state.history.seed(seed)

        win_condition = self._select_win_condition(titles)
        if win_condition is None:
            return self._mark_unplayable("Could not derive a win condition from the catalog")
        self.state.win_condition = win_condition
        self.state.phase = GamePhase.PLAYING

        logger.info(
            f"[Engine] Game initialized. Starting movie: {seed.title}. "
            f"Win condition: {win_condition.description}"
        )
        return seed

    def _mark_unplayable(self, reason: str) -> None:
        logger.critical(f"[Engine] {reason}")
        self.state.unplayable = True
        self.state.finish(winner=None)
        return None

    def _select_win_condition(self, titles: list[str]) -> WinCondition | None:
        """Pick a family uniformly among those with targets, then a target."""
        genres: set[str] = set()
        years: set[int] = set()
        for title in titles:
            movie = self.catalog.lookup_by_title(title)
            if movie is None:
                continue
            genres.update(g for g in movie.genres if g and g.strip())
            if movie.year > 0:
                years.add(movie.year)

        families = []
        if genres:
            families.append(WinConditionKind.GENRE)
        if years:
            families.append(WinConditionKind.YEAR)
        if not families:
            return None

        kind = self.rng.choice(families)
        if kind == WinConditionKind.GENRE:
            return WinCondition.genre(self.rng.choice(sorted(genres)), self.win_threshold)
        return WinCondition.year(self.rng.choice(sorted(years)), self.win_threshold)

    # =========================================================================
    # Turn actions
    # =========================================================================

    def set_active_link_rule(self, rule: LinkRule | CreditRole | str | None):
        """Choose the link rule for the move in progress."""
        if rule is not None and not isinstance(rule, LinkRule):
            rule = link_rule_for(rule)
        self.state.active_link_rule = rule

    def switch_turn(self):
        self.state.swap_players()
        self.state.active_link_rule = None

    def report_timeout(self) -> Player | None:
        """
        The current player ran out of time; the other player wins.

        No-op if the game is already over or has not started.
        Returns the winner, or None when no game is running.
        """
        if self.state.phase == GamePhase.SETUP:
            return None
        if self.state.is_game_over:
            return self.state.winner
        logger.info(f"[Engine] {self.current_player.name} timed out")
        self.state.finish(winner=self.state.other_player)
        return self.state.winner

    def submit_move(self, title: str | None) -> MoveResult:
        """Validate and apply the current player's move."""
        state = self.state
        if state.is_game_over:
            return MoveResult.usage_error("Game is already over.")
        if state.phase == GamePhase.SETUP:
            return MoveResult.usage_error("Game has not been started.")
        rule = state.active_link_rule
        if rule is None:
            return MoveResult.usage_error("No link rule selected for this turn.")

        player = state.current_player
        opponent = state.other_player
        title = (title or "").strip()

        if not title:
            if self.empty_title_policy == EmptyTitlePolicy.SIGNAL:
                return MoveResult.empty_input()
            return self._forfeit(
                ForfeitReason.EMPTY_TITLE,
                f"Movie title was empty. {player.name} loses.",
            )

        movie = self.catalog.lookup_by_title(title)
        if movie is None:
            return self._forfeit(
                ForfeitReason.NOT_FOUND,
                f"Movie '{title}' not found. {player.name} loses.",
            )

        if state.history.contains_title(movie.title):
            return self._forfeit(
                ForfeitReason.REPEATED,
                f"'{movie.title}' has already been played. {player.name} loses.",
                movie,
            )

        first_move = state.history.only_seed
        if first_move:
            justification = FIRST_MOVE_JUSTIFICATION
        else:
            check = rule.validate(state.history.last.movie, movie)
            if not check.valid:
                return self._forfeit(
                    ForfeitReason.INVALID_LINK,
                    f"Invalid link to '{movie.title}' by {player.name}. Reason: {check.reason}.",
                    movie,
                )
            justification = check.reason

        player.add_played_movie(movie)
        player.record_link_usage(rule.rule_id)
        state.history.record(movie, player, rule.rule_id, justification, first_move)
        state.moves_made += 1
        state.active_link_rule = None
        logger.info(f"[Engine] Valid move '{movie.title}' by {player.name} ({justification})")

        if state.win_condition.check_win(player):
            state.finish(winner=player)
            logger.info(f"[Engine] {player.name} wins with '{movie.title}'")
            return MoveResult.win(movie, justification, player)

        return MoveResult.valid(movie, justification)

    def _forfeit(self, reason: ForfeitReason, message: str, movie: Movie | None = None) -> MoveResult:
        winner = self.state.other_player
        self.state.finish(winner=winner)
        logger.warning(f"[Engine] Forfeit ({reason.value}): {message}")
        return MoveResult.forfeit(reason, f"{message} {winner.name} wins!", winner, movie)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def other_player(self) -> Player:
        return self.state.other_player

    @property
    def winner(self) -> Player | None:
        return self.state.winner

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def is_unplayable(self) -> bool:
        return self.state.unplayable

    @property
    def active_link_rule(self) -> LinkRule | None:
        return self.state.active_link_rule

    @property
    def win_condition(self) -> WinCondition | None:
        return self.state.win_condition

    @property
    def history(self) -> tuple[GameMove, ...]:
        return self.state.history.entries

    @property
    def last_played_movie(self) -> Movie | None:
        last = self.state.history.last
        return last.movie if last else None

    @property
    def win_condition_description(self) -> str:
        if self.state.win_condition is None:
            return "Win condition not set."
        return self.state.win_condition.description

    def player_progress(self, player: Player | None) -> str:
        if player is None or self.state.win_condition is None:
            return "N/A"
        return self.state.win_condition.progress(player)

    @property
    def moves_made(self) -> int:
        return self.state.moves_made

    @property
    def round_number(self) -> int:
        """Two player moves per round; round 1 before anyone moves."""
        return max(1, (self.state.moves_made + 1) // 2)
