"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from checkie.core.enums import Color

_LOGGER = logging.getLogger(__name__)

_COLOR_NAMES: dict[str, Color | None] = {
    "white": Color.WHITE,
    "black": Color.BLACK,
    "none": None,
}
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass
class AppSettings:
    """Match and remote-advisor settings."""

    remote_color: Color | None = Color.BLACK
    api_key: str | None = None
    model: str | None = None
    test_mode: bool = False
    hints_enabled: bool = True
    request_timeout_s: float = 30.0

    @property
    def use_remote_model(self) -> bool:
        """Whether a configured language model should play the remote side."""
        return bool(self.api_key) and bool(self.model) and not self.test_mode

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        env = os.environ if environ is None else environ
        settings = cls(
            api_key=env.get("GEMINI_API_KEY") or None,
            model=env.get("GEMINI_MODEL") or None,
            test_mode="AI_TEST_MODE" in env,
        )

        color_name = env.get("CHECKIE_REMOTE_COLOR")
        if color_name is not None:
            key = color_name.strip().lower()
            if key in _COLOR_NAMES:
                settings.remote_color = _COLOR_NAMES[key]
            else:
                _LOGGER.warning("Ignoring unknown CHECKIE_REMOTE_COLOR=%r", color_name)

        hints = env.get("CHECKIE_HINTS")
        if hints is not None:
            settings.hints_enabled = hints.strip().lower() in _TRUE_VALUES

        timeout = env.get("CHECKIE_TIMEOUT")
        if timeout is not None:
            try:
                value = float(timeout)
            except ValueError:
                _LOGGER.warning("Ignoring non-numeric CHECKIE_TIMEOUT=%r", timeout)
            else:
                if value > 0:
                    settings.request_timeout_s = value
                else:
                    _LOGGER.warning("Ignoring non-positive CHECKIE_TIMEOUT=%r", timeout)

        return settings
