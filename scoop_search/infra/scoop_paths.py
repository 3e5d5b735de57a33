import os
from collections.abc import Mapping
from pathlib import Path


def resolve_scoop_root(env: Mapping[str, str] | None = None) -> Path:
    """Finds the Scoop installation directory.

    Honors the `SCOOP` environment variable (as Scoop itself does), otherwise falls
    back to `~/scoop`.

    Args:
        env: Environment mapping. Defaults to `os.environ`.

    Returns:
        The Scoop root directory. It is not checked for existence.
    """
    env = os.environ if env is None else env
    custom = env.get("SCOOP", "").strip()
    if custom:
        return Path(custom).expanduser()
    return Path.home() / "scoop"


def resolve_buckets_root(env: Mapping[str, str] | None = None) -> Path:
    """Returns the directory holding one subdirectory per installed bucket."""
    return resolve_scoop_root(env) / "buckets"
