import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class GameSettings:
    """Defaults for the command-line game, overridable by CLI options."""

    level: int = 1
    seed: int | None = None
    orientation: str = "landscape"


def _int_from_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_settings() -> GameSettings:
    """
    Read ``MAZE_LEVEL``, ``MAZE_SEED`` and ``MAZE_ORIENTATION``.

    A local ``.env`` file is loaded first (values already in the environment
    win). Unparseable numbers fall back to the defaults.
    """
    load_dotenv()  # does nothing if no file is present

    return GameSettings(
        level=_int_from_env("MAZE_LEVEL", 1),
        seed=_int_from_env("MAZE_SEED", None),
        orientation=os.getenv("MAZE_ORIENTATION", "landscape").strip().lower()
        or "landscape",
    )
