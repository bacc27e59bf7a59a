from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

from hustle.core.models import GameSnapshot, Vec3
from hustle.session import GameContext

logger = logging.getLogger(__name__)

ActionName = Literal[
    "start_game",
    "restart_game",
    "pause_toggle",
    "main_menu",
    "accept_task",
    "decline_task",
    "complete_task",
    "interact",
    "consume_coffee",
    "use_coffee_machine",
    "buy_energy_drink",
]

ACTION_NAMES: frozenset[str] = frozenset(ActionName.__args__)  # type: ignore[attr-defined]

# Player commands that only make sense mid-shift.
_PLAYING_ONLY: frozenset[str] = frozenset(
    {
        "accept_task",
        "decline_task",
        "complete_task",
        "interact",
        "consume_coffee",
        "use_coffee_machine",
        "buy_energy_drink",
    }
)


@dataclass(frozen=True, slots=True)
class ActionResult:
    action: ActionName
    applied: bool
    snapshot: GameSnapshot


def _require_task_id(payload: dict[str, Any]) -> str:
    task_id = payload.get("task_id")
    if not task_id:
        raise ValueError("task_id is required")
    return str(task_id)


def _require_position(payload: dict[str, Any]) -> Vec3:
    raw = payload.get("position")
    if raw is None:
        raise ValueError("position is required")
    return Vec3.model_validate(raw)


def _buy_coffee(ctx: GameContext) -> bool:
    # Paid at the vending price; the coffee bonus only refunds it.
    if not ctx.vending_machine.can_afford():
        return False
    ctx.game.modify_score(-ctx.config.interactables.drink_cost)
    if not ctx.game.is_playing:
        return True
    ctx.game.consume_coffee()
    return True


def dispatch_action(*, ctx: GameContext, action: str, payload: dict[str, Any] | None = None) -> ActionResult:
    """Entry point for every input source (HTTP, tests, scripted bots).

    Malformed requests (unknown action, missing fields) raise ValueError.
    Well-formed commands the game rejects are no-ops reported as applied=False.
    """

    if action not in ACTION_NAMES:
        raise ValueError(f"Unknown action: {action}")
    body = payload or {}

    task_id = _require_task_id(body) if action in {"accept_task", "decline_task"} else ""
    position = _require_position(body) if action in {"interact", "complete_task"} else None

    if action in _PLAYING_ONLY and not ctx.game.is_playing:
        applied = False
    elif action == "start_game":
        applied = ctx.start_game()
    elif action == "restart_game":
        applied = ctx.restart_game()
    elif action == "pause_toggle":
        applied = ctx.game.toggle_pause()
    elif action == "main_menu":
        applied = ctx.return_to_main_menu()
    elif action == "accept_task":
        applied = ctx.tasks.accept(task_id)
    elif action == "decline_task":
        applied = ctx.tasks.decline(task_id)
    elif action == "complete_task" and position is not None:
        # Confirming on the spot; `interact` is the timed way to do the same work.
        applied = ctx.tasks.is_near(position, ctx.config.interactables.interaction_range) and ctx.tasks.complete()
    elif action == "interact" and position is not None:
        applied = ctx.player.interact(position)
    elif action == "consume_coffee":
        applied = _buy_coffee(ctx)
    elif action == "use_coffee_machine":
        applied = ctx.coffee_machine.interact()
    elif action == "buy_energy_drink":
        applied = ctx.vending_machine.interact()
    else:
        applied = False

    if applied:
        logger.debug("action=%s applied", action)
    return ActionResult(action=action, applied=applied, snapshot=ctx.snapshot())  # type: ignore[arg-type]
