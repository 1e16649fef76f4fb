"""The rule engine and state machine load without the Qt bridge."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

_SRC = Path(__file__).resolve().parents[1] / "src"


def _loaded_qt_after(statement: str) -> bool:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(_SRC), env.get("PYTHONPATH")]))
    code = f"import sys\n{statement}\nprint(any(m.startswith('PyQt6') for m in sys.modules))"
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )
    return result.stdout.strip() == "True"


@pytest.mark.parametrize(
    "statement",
    [
        "import checkie.core",
        "import checkie.game.state",
        "import checkie.remote",
    ],
)
def test_core_modules_do_not_load_qt(statement: str) -> None:
    assert not _loaded_qt_after(statement)


def test_session_module_loads_qt() -> None:
    assert _loaded_qt_after("import checkie.remote.session")
