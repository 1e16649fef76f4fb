"""Remote collaborator seam: advisor protocol, fallback policy and prompting.

The Qt pieces, :class:`~checkie.remote.qt_bridge.AdvisorWorker` and
:class:`~checkie.remote.session.RemoteSession`, are imported from their own
modules so that the rule engine and state machine load without PyQt6.
"""

from checkie.remote.advisor import IMoveAdvisor, SimpleAdvisor, Suggestion
from checkie.remote.errors import (
    AdvisorError,
    AdvisorTimeout,
    InvalidResponseFormat,
    NoApiKey,
    NoModel,
    NoPossibleMoves,
    ParseError,
    RequestFailed,
)
from checkie.remote.prompting import (
    CompletionAdvisor,
    advisor_from_settings,
    build_hint_prompt,
    build_move_prompt,
    describe_moves,
    format_board,
    format_square,
    parse_move_choice,
)

__all__ = [
    # Advisors
    "CompletionAdvisor",
    "IMoveAdvisor",
    "SimpleAdvisor",
    "Suggestion",
    # Errors
    "AdvisorError",
    "AdvisorTimeout",
    "InvalidResponseFormat",
    "NoApiKey",
    "NoModel",
    "NoPossibleMoves",
    "ParseError",
    "RequestFailed",
    # Prompting
    "advisor_from_settings",
    "build_hint_prompt",
    "build_move_prompt",
    "describe_moves",
    "format_board",
    "format_square",
    "parse_move_choice",
]
