"""Game management layer — engine, history, players, session, state machine.

Quick start::

    from checkie.game import GameSession, InputKey, Key, TurnStateMachine

    machine = TurnStateMachine(GameSession())
    machine.start()
    machine.handle(Key(InputKey.SELECT))
    print(machine.view().status_message)
"""

from checkie.game.engine import GameEngine, MoveOutcome
from checkie.game.history import MoveHistory
from checkie.game.interfaces import GameError, GamePhase, IPlayer
from checkie.game.player import HumanPlayer, RemotePlayer
from checkie.game.session import GameSession, RemoteStatus
from checkie.game.state import (
    Event,
    GameOver,
    HintReady,
    InputKey,
    Key,
    MultiCapture,
    Phase,
    PieceSelected,
    Playing,
    RemoteMoveFailed,
    RemoteMoveReady,
    RemoteTurn,
    Transition,
    TurnStateMachine,
    ViewData,
    Welcome,
)

__all__ = [
    # Interfaces
    "GameError",
    "GamePhase",
    "IPlayer",
    # Concrete
    "GameEngine",
    "GameSession",
    "HumanPlayer",
    "MoveHistory",
    "MoveOutcome",
    "RemotePlayer",
    "RemoteStatus",
    # State machine
    "Event",
    "GameOver",
    "HintReady",
    "InputKey",
    "Key",
    "MultiCapture",
    "Phase",
    "PieceSelected",
    "Playing",
    "RemoteMoveFailed",
    "RemoteMoveReady",
    "RemoteTurn",
    "Transition",
    "TurnStateMachine",
    "ViewData",
    "Welcome",
]
