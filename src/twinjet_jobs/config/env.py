# src/twinjet_jobs/config/env.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from twinjet_jobs.models import ClientOptions

try:
    # De facto standard for .env files
    from dotenv import dotenv_values, find_dotenv, load_dotenv  # type: ignore
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "Missing dependency 'python-dotenv'. Install it with:\n"
        "  pip install python-dotenv"
    ) from e


# --- Public contract ---------------------------------------------------------

class EnvError(RuntimeError):
    """Raised when required environment variables are missing or malformed."""


REQUIRED_KEYS: Tuple[str, ...] = (
    "TWINJET_API_TOKEN",
)

OPTIONAL_KEYS: Tuple[str, ...] = (
    "TWINJET_BASE_URL",
    "TWINJET_TIMEOUT_MS",
    "TWINJET_LIVE",
)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def load_project_dotenv(start: Optional[Path] = None, *, override: bool = False) -> Path:
    """
    Load variables from the nearest `.env` file (searching upward from `start` or CWD).
    Does NOT override existing env vars unless `override=True`.
    Returns the resolved Path to the .env file if found; otherwise Path().
    """
    start_path = Path.cwd() if start is None else Path(start)

    dotenv_str = find_dotenv(filename=".env", usecwd=True)
    dotenv_path = Path(dotenv_str) if dotenv_str else Path()

    # python-dotenv searches from CWD; honour an explicit `start` too
    if not dotenv_str:
        for p in (start_path, *start_path.parents):
            candidate = p / ".env"
            if candidate.exists():
                dotenv_path = candidate
                break

    if not dotenv_path.exists() or dotenv_path.is_dir():
        return Path()

    load_dotenv(dotenv_path=dotenv_path, override=override)
    return dotenv_path.resolve()


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Not a boolean: {raw!r}")


def env(name: str, *, default=None, required: bool = False, cast=None):
    """
    Test-friendly accessor.

    - If `required=True` and var is missing, raise KeyError(name).
    - If `cast` is provided, apply it to the raw string and propagate cast errors.
    - Returns `default` when missing (or blank) and not required.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        if required:
            raise KeyError(name)
        return default

    if cast is not None:
        return cast(raw)
    return raw


# --- Main loader APIs --------------------------------------------------------

def load_env(
    dotenv_path: Optional[Path] = None,
    *,
    override: bool = False,
    required_keys: Tuple[str, ...] = (),
    strict: bool = False,
) -> Dict[str, Optional[str]]:
    """
    Load env vars from a .env file into the process environment and return a dict
    of key/value pairs found in that file.

    - If `dotenv_path` is provided, load exactly that file.
    - Otherwise, auto-discover the nearest .env via `load_project_dotenv`.
    - If `strict=True` and `required_keys` are provided, ensure they are present
      in `os.environ` after loading; otherwise raise EnvError.
    - `override` controls whether .env values replace existing process env values.
    """
    loaded: Dict[str, Optional[str]] = {}

    if dotenv_path:
        path = Path(dotenv_path)
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            loaded = dict(dotenv_values(path))
    else:
        path = load_project_dotenv(override=override)
        if path.is_file():
            loaded = dict(dotenv_values(path))

    if strict and required_keys:
        missing = [k for k in required_keys if not os.getenv(k)]
        if missing:
            raise EnvError(
                f"Missing required environment variable(s): {', '.join(missing)}")

    return loaded


def get_app_env(dotenv_path: Path | str | None = ".env", *, strict: bool = True) -> ClientOptions:
    """
    Load the TWINJET_* variables and return ClientOptions for JobsClient.

    - `dotenv_path` may be a Path/str pointing to a specific .env file or None to
      auto-discover the nearest one.
    - Existing process env wins over the file (CI/host settings first).
    - When `strict=True` a missing TWINJET_API_TOKEN raises EnvError; otherwise
      api_token is None and JobsClient will refuse to start without one.
    - Optional values that are unset stay None so the client defaults apply.
    """
    load_env(
        Path(dotenv_path) if dotenv_path else None,
        override=False,
        required_keys=REQUIRED_KEYS,
        strict=strict,
    )

    try:
        timeout = env("TWINJET_TIMEOUT_MS", cast=int)
        live = env("TWINJET_LIVE", cast=parse_bool)
    except ValueError as e:
        raise EnvError(f"Invalid TwinJet environment value: {e}") from e

    return ClientOptions(
        api_token=env("TWINJET_API_TOKEN"),
        base_url=env("TWINJET_BASE_URL"),
        timeout=timeout,
        live=live,
    )


__all__ = [
    "EnvError",
    "REQUIRED_KEYS",
    "OPTIONAL_KEYS",
    "load_project_dotenv",
    "load_env",
    "parse_bool",
    "env",
    "get_app_env",
]
