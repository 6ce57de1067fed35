"""Mini-game reward adapter: score plus stat in, XP and tokens out."""
from __future__ import annotations

import logging
import math
import numbers
from typing import Iterable

from arena import ActionResult, GameSession
from arena.types import (
    InsufficientResourceError,
    NotFoundError,
    PreconditionError,
    ValidationError,
)
from arena.validation import validate_id

from arena_minigame.catalog import DEFAULT_MINIGAMES
from arena_minigame.types import ActiveGame, MinigameDef, RewardBundle

logger = logging.getLogger(__name__)


def compute_rewards(
    game: MinigameDef,
    stat_value: int,
    score: float,
    perfect: bool,
    stat_coefficient: float = 0.02,
) -> RewardBundle:
    """Scale the base or perfect bundle by the stat, then by score/100.

    XP and tokens are floored separately.
    """
    bundle = game.perfect if perfect else game.base
    multiplier = 1 + stat_value * stat_coefficient
    return RewardBundle(
        xp=math.floor(bundle.xp * multiplier * (score / 100)),
        tokens=math.floor(bundle.tokens * multiplier * (score / 100)),
    )


class MinigameAdapter:
    """Gates, starts and completes mini-game rounds for one session."""

    def __init__(
        self, session: GameSession, games: Iterable[MinigameDef] = DEFAULT_MINIGAMES
    ) -> None:
        self._session = session
        self._games: dict[str, MinigameDef] = {g.id: g for g in games}
        self._active: ActiveGame | None = None

    def game(self, game_id: str) -> MinigameDef | None:
        return self._games.get(game_id)

    def games(self) -> list[MinigameDef]:
        return list(self._games.values())

    @property
    def active(self) -> ActiveGame | None:
        return self._active

    def _check(self, game_id: str) -> MinigameDef:
        game = self._games.get(game_id)
        if game is None:
            raise NotFoundError("Game not found", game_id=game_id)
        influence = self._session.state.influence
        if influence < game.influence_cost:
            raise InsufficientResourceError(
                f"Need {game.influence_cost} influence "
                f"({game.influence_cost - influence} more)",
                required=game.influence_cost, available=influence,
            )
        return game

    def can_play(self, game_id: str) -> ActionResult:
        try:
            game = self._check(game_id)
        except (NotFoundError, InsufficientResourceError) as exc:
            return ActionResult.fail(exc)
        return ActionResult.ok("Ready to play", game_id=game.id, cost=game.influence_cost)

    def start(self, game_id: str) -> ActionResult:
        session = self._session

        def body() -> ActionResult:
            validate_id(game_id, session.config.economy.max_item_id_length, "game ID")
            if self._active is not None:
                raise PreconditionError(
                    "A mini-game is already in progress", game_id=self._active.game_id
                )
            session.check_rate("minigame")
            game = self._check(game_id)
            session.spend_influence(game.influence_cost)
            session.rate_limiter.record_action("minigame")
            self._active = ActiveGame(game.id, session.now())
            logger.info("mini-game started: %s", game.id)
            return ActionResult.ok(f"Started {game.name}", game_id=game.id,
                                   cost=game.influence_cost)

        return session.execute(body)

    def complete(self, score: float, perfect: bool = False) -> ActionResult:
        """Grant rewards for the active round through the session primitives."""
        session = self._session

        def body() -> ActionResult:
            valid = isinstance(score, numbers.Real) and not isinstance(score, bool)
            if not valid or not 0 <= score <= 100:
                raise ValidationError("Score must be between 0 and 100", field="score")
            if self._active is None:
                raise PreconditionError("No mini-game in progress")
            game = self._games[self._active.game_id]
            cfg = session.config.minigames
            stat_value = session.effective_stat(game.stat, cfg.default_stat)
            rewards = compute_rewards(game, stat_value, score, perfect, cfg.stat_coefficient)

            gain = session.add_xp(rewards.xp)
            session.add_tokens(rewards.tokens)
            session.state.bump("minigames_played")
            if perfect:
                session.state.bump("minigames_won")
            started_at = self._active.started_at
            self._active = None
            logger.info("mini-game %s done: score=%s xp=%d tokens=%d",
                        game.id, score, rewards.xp, rewards.tokens)
            return ActionResult.ok(
                f"{game.name} complete! +{rewards.xp} XP, +{rewards.tokens} tokens",
                game_id=game.id, score=score, perfect=perfect, xp=rewards.xp,
                tokens=rewards.tokens, leveled_up=gain.leveled_up,
                duration=session.now() - started_at,
            )

        return session.execute(body)

    def abandon(self) -> bool:
        """Drop the active round without rewards; the influence stays spent."""
        if self._active is None:
            return False
        self._active = None
        return True
