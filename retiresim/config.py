"""Environment-driven defaults for the simulator."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

DEFAULT_ENV_PATH = Path(__file__).parent.parent / ".env"


def load_env_file(env_path: Optional[Path] = None) -> bool:
    """Load a .env file into the process environment.

    Parameters
    ----------
    env_path : Path, optional
        File to load. Defaults to the project root .env, falling back to
        a .env in the current directory.

    Returns
    -------
    bool
        True if at least one variable was loaded
    """
    env_path = env_path or DEFAULT_ENV_PATH
    if env_path.exists():
        return load_dotenv(env_path)
    # Also try loading from current directory
    return load_dotenv()


load_env_file()


@dataclass
class Settings:
    """Simulation defaults read from the environment.

    Parameters
    ----------
    num_simulations : int
        RETIRESIM_NUM_SIMULATIONS, default 1000
    inflation_rate : float
        RETIRESIM_INFLATION_RATE as a decimal, default 0.025
    seed : int, optional
        RETIRESIM_SEED; unset means unseeded
    """

    num_simulations: int = 1000
    inflation_rate: float = 0.025
    seed: Optional[int] = None


def _read(name: str, cast, default):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def load_settings() -> Settings:
    """Read settings from environment variables.

    Raises
    ------
    ValueError
        If a variable is set but cannot be parsed
    """
    return Settings(
        num_simulations=_read("RETIRESIM_NUM_SIMULATIONS", int, 1000),
        inflation_rate=_read("RETIRESIM_INFLATION_RATE", float, 0.025),
        seed=_read("RETIRESIM_SEED", int, None),
    )
