# src/jp_post_tracking/config/env.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from jp_post_tracking.models import EnvCfg
from jp_post_tracking.models.env_cfg import DEFAULT_SEARCH_URL, DEFAULT_TIMEOUT

try:
    # De facto standard for .env files
    from dotenv import load_dotenv, find_dotenv, dotenv_values  # type: ignore
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "Missing dependency 'python-dotenv'. Install it with:\n"
        "  pip install python-dotenv"
    ) from e


# --- Public contract ---------------------------------------------------------

class EnvError(RuntimeError):
    """Raised when required environment variables are missing or invalid."""


REQUIRED_KEYS: Tuple[str, ...] = (
    "JP_POST_SEARCH_URL",
)


def load_project_dotenv(start: Optional[Path] = None, *, override: bool = False) -> Path:
    """
    Load variables from the nearest `.env` file (searching upward from `start` or CWD).
    Does NOT override existing env vars unless `override=True`.
    Returns the resolved Path to the .env file if found; otherwise Path().
    """
    start_path = Path.cwd() if start is None else Path(start)

    dotenv_str = "" if start is not None else find_dotenv(filename=".env", usecwd=True)
    dotenv_path = Path(dotenv_str) if dotenv_str else Path()

    if not dotenv_str:
        for p in (start_path, *start_path.parents):
            candidate = p / ".env"
            if candidate.is_file():
                dotenv_path = candidate
                break

    if not dotenv_path.is_file():
        return Path()

    load_dotenv(dotenv_path=dotenv_path, override=override)
    return dotenv_path.resolve()


def env(name: str, *, default: Optional[str] = None, required: bool = False, cast=None):
    """
    Test-friendly accessor.

    - If `required=True` and var is missing, raise KeyError(name).
    - If `cast` is provided, apply it to the raw string and propagate cast errors.
    - Returns `default` when missing and not required.
    """
    raw = os.getenv(name)
    if raw is None or raw == "":
        if required:
            raise KeyError(name)
        return default

    if cast is not None:
        return cast(raw)
    return raw


def load_env(
    dotenv_path: Optional[Path] = None,
    *,
    override: bool = False,
    discover: bool = True,
    required_keys: Tuple[str, ...] = (),
    strict: bool = False,
) -> dict[str, str]:
    """
    Load env vars from a .env file into the process environment and return the
    key/value pairs found in that file.

    - If `dotenv_path` is provided, load exactly that file (silently skipped if absent).
    - Otherwise, auto-discover the nearest .env via `load_project_dotenv`,
      unless `discover=False`.
    - If `strict=True`, every key in `required_keys` must be set afterwards.
    """
    loaded: dict[str, str] = {}

    path = Path()
    if dotenv_path:
        path = Path(dotenv_path)
    elif discover:
        path = load_project_dotenv(override=override)
    if path and path.is_file():
        load_dotenv(dotenv_path=path, override=override)
        loaded = {k: v for k, v in dotenv_values(path).items() if v is not None}

    if strict and required_keys:
        missing = [k for k in required_keys if not os.getenv(k)]
        if missing:
            raise EnvError(
                f"Missing required environment variable(s): {', '.join(missing)}")

    return loaded


def get_app_env(
    dotenv_path: Path | str | None = None,
    *,
    strict: bool = False,
    discover: bool = True,
) -> EnvCfg:
    """
    Load the fetcher settings and return a typed config object.

    - `dotenv_path` may point to a specific .env file. When None, the nearest
      .env upward from CWD is used; `discover=False` disables file loading
      (useful for tests).
    - Existing process env always wins over the file.
    - `strict=True` requires REQUIRED_KEYS; otherwise defaults apply.
    """
    load_env(
        Path(dotenv_path) if dotenv_path else None,
        override=False,
        discover=discover,
        required_keys=REQUIRED_KEYS,
        strict=strict,
    )

    try:
        timeout = env("JP_POST_TIMEOUT", default=DEFAULT_TIMEOUT, cast=int)
    except ValueError as e:
        raise EnvError(
            f"JP_POST_TIMEOUT must be an integer number of seconds: {os.getenv('JP_POST_TIMEOUT')!r}") from e

    return EnvCfg(
        JP_POST_SEARCH_URL=env("JP_POST_SEARCH_URL", default=DEFAULT_SEARCH_URL),
        JP_POST_PROXY=env("JP_POST_PROXY"),
        JP_POST_PROXY_PORT=env("JP_POST_PROXY_PORT"),
        JP_POST_TIMEOUT=timeout,
    )


__all__ = [
    "EnvError",
    "REQUIRED_KEYS",
    "load_project_dotenv",
    "load_env",
    "env",
    "get_app_env",
]
