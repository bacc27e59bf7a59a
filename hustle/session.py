from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

from hustle.config import HustleConfig
from hustle.core.events import GameEvent, Observer, Signal
from hustle.core.models import GameSnapshot
from hustle.core.scheduler import Scheduler
from hustle.game_engine import GameStateEngine
from hustle.interactables import CoffeeMachine, EnergyDrinkVendingMachine
from hustle.player import PlayerAgent
from hustle.task_queue import TaskQueueEngine


@dataclass(slots=True)
class GameContext:
    """Everything one running game needs, built once and passed explicitly."""

    config: HustleConfig
    game: GameStateEngine
    tasks: TaskQueueEngine
    scheduler: Scheduler
    coffee_machine: CoffeeMachine
    vending_machine: EnergyDrinkVendingMachine
    player: PlayerAgent

    def tick(self, delta: float) -> bool:
        """Advance one step. Nothing time-driven moves unless the game is playing."""

        if delta <= 0 or not self.game.is_playing:
            return False

        self.tasks.tick(delta)
        # A failure inside the queue tick may have ended the game.
        if self.game.is_playing:
            self.scheduler.advance(delta)
        self.game.tick(delta)
        return True

    def _reset_world(self) -> None:
        self.scheduler.clear()
        self.player.reset()
        self.coffee_machine.reset()
        self.tasks.reset()

    def start_game(self) -> bool:
        self._reset_world()
        return self.game.start_game()

    def restart_game(self) -> bool:
        self._reset_world()
        return self.game.restart_game()

    def return_to_main_menu(self) -> bool:
        return self.game.return_to_main_menu()

    def signals(self) -> tuple[Signal, ...]:
        return (
            self.game.signals
            + self.tasks.signals
            + (
                self.coffee_machine.brew_started,
                self.coffee_machine.coffee_served,
                self.player.performance_started,
            )
        )

    def watch(self, listener: Callable[[GameEvent], None]) -> Callable[[], None]:
        """Forward every engine signal to `listener` as a GameEvent.

        Returns a callable that removes the subscriptions again.
        """

        subscriptions: list[tuple[Signal, Observer]] = []
        for signal in self.signals():

            def _forward(*args: object, _name: str = signal.name) -> None:
                listener(GameEvent.from_signal(_name, args))  # type: ignore[arg-type]

            subscriptions.append((signal, signal.subscribe(_forward)))

        def _unwatch() -> None:
            for signal, observer in subscriptions:
                signal.unsubscribe(observer)

        return _unwatch

    def snapshot(self) -> GameSnapshot:
        session = self.game.session
        return GameSnapshot(
            score=session.score,
            stress=session.stress,
            phase=session.phase,
            game_over_reason=session.game_over_reason,
            active_task=self.tasks.active_task(),
            pending_tasks=self.tasks.pending_tasks(),
            coffee_available=self.coffee_machine.available,
            player_busy=self.player.busy,
        )


def build_game_context(config: HustleConfig | None = None, *, rng: random.Random | None = None) -> GameContext:
    cfg = config or HustleConfig()
    rng = rng or random.Random()

    game = GameStateEngine(cfg.game)
    tasks = TaskQueueEngine(game, cfg.queue, rng=rng)
    game.bind_workload(tasks.outstanding_count)

    scheduler = Scheduler()
    coffee = CoffeeMachine(game, scheduler, cfg.interactables)
    vending = EnergyDrinkVendingMachine(game, cfg.interactables)
    player = PlayerAgent(tasks, scheduler, cfg.interactables, interactables=(coffee, vending), rng=rng)

    return GameContext(
        config=cfg,
        game=game,
        tasks=tasks,
        scheduler=scheduler,
        coffee_machine=coffee,
        vending_machine=vending,
        player=player,
    )
