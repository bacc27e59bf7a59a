from __future__ import annotations

import logging
from typing import Protocol

from hustle.config import InteractableRules
from hustle.core.events import Signal
from hustle.core.models import Vec3
from hustle.core.scheduler import Scheduler
from hustle.game_engine import GameStateEngine

logger = logging.getLogger(__name__)


class Interactable(Protocol):
    position: Vec3

    def interact(self) -> bool:  # pragma: no cover
        ...

    def interaction_prompt(self) -> str:  # pragma: no cover
        ...


class CoffeeMachine:
    """Brews for a couple of seconds, serves coffee, then cools down."""

    def __init__(
        self,
        game: GameStateEngine,
        scheduler: Scheduler,
        rules: InteractableRules | None = None,
    ) -> None:
        self.game = game
        self.scheduler = scheduler
        self.rules = rules or InteractableRules()
        self.position = self.rules.coffee_machine_position
        self.available = True

        self.brew_started = Signal("coffee_brew_started")
        self.coffee_served = Signal("coffee_served")

    def interact(self) -> bool:
        if not self.available or not self.game.is_playing:
            return False

        self.available = False
        self.brew_started.emit()
        self.scheduler.schedule(self.rules.coffee_brew_seconds, self._serve, label="coffee:brew")
        return True

    def _serve(self) -> None:
        self.game.consume_coffee()
        self.coffee_served.emit()
        self.scheduler.schedule(self.rules.coffee_cooldown_seconds, self._ready, label="coffee:cooldown")

    def _ready(self) -> None:
        self.available = True

    def reset(self) -> None:
        self.available = True

    def interaction_prompt(self) -> str:
        return "Press E to brew coffee" if self.available else "Coffee machine is brewing..."


class EnergyDrinkVendingMachine:
    """Trades score for an immediate stress drop."""

    def __init__(self, game: GameStateEngine, rules: InteractableRules | None = None) -> None:
        self.game = game
        self.rules = rules or InteractableRules()
        self.position = self.rules.vending_machine_position

    def can_afford(self) -> bool:
        return self.game.current_score() >= self.rules.drink_cost

    def interact(self) -> bool:
        if not self.game.is_playing or not self.can_afford():
            return False

        self.game.modify_score(-self.rules.drink_cost)
        # The last drink can get you fired; the game is over by then.
        if self.game.is_playing:
            self.game.modify_stress(-self.rules.energy_boost)
        logger.debug("energy drink bought cost=%s", self.rules.drink_cost)
        return True

    def interaction_prompt(self) -> str:
        if self.can_afford():
            return f"Press E to buy energy drink (Cost: {self.rules.drink_cost} points)"
        return "Not enough points for energy drink"
