from __future__ import annotations

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from hustle.core.models import GamePhase, GameSession


class GameFSM(StateMachine):
    """FSM wrapper around GameSession.phase.

    The engine owns score/stress; the FSM only guards phase moves:
    - main menu -> playing <-> paused
    - playing/paused -> game over (terminal until start/restart)
    - anything -> main menu
    """

    main_menu = State(GamePhase.main_menu.value, value=GamePhase.main_menu.value, initial=True)
    playing = State(GamePhase.playing.value, value=GamePhase.playing.value)
    paused = State(GamePhase.paused.value, value=GamePhase.paused.value)
    game_over = State(GamePhase.game_over.value, value=GamePhase.game_over.value)

    start_game = main_menu.to(playing) | playing.to.itself() | paused.to(playing) | game_over.to(playing)
    pause_game = playing.to(paused)
    resume_game = paused.to(playing)
    end_game = playing.to(game_over) | paused.to(game_over)
    leave_to_menu = main_menu.to.itself() | playing.to(main_menu) | paused.to(main_menu) | game_over.to(main_menu)

    def __init__(self, session: GameSession):
        self.session = session
        super().__init__(start_value=session.phase.value)

    def sync_phase_to_model(self) -> None:
        self.session.phase = GamePhase(str(self.current_state.value))


def try_transition(session: GameSession, event: str) -> bool:
    """Apply `event` to the session phase if the FSM allows it."""

    fsm = GameFSM(session)
    try:
        fsm.send(event)
    except TransitionNotAllowed:
        return False
    fsm.sync_phase_to_model()
    return True
