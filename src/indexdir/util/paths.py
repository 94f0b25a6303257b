"""Path helpers shared by the directory resolvers."""

from __future__ import annotations

import os
import sys
from pathlib import Path

HOME_TOKEN = "~"
ENV_APP_BASE = "INDEXDIR_APP_BASE"


def application_base_dir() -> Path:
    """Return the directory the running application is deployed in.

    Precedence:
    1) INDEXDIR_APP_BASE
    2) directory of the ``__main__`` script
    3) current working directory
    """
    configured = os.getenv(ENV_APP_BASE)
    if configured:
        return Path(configured)

    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    return Path.cwd()


def substitute_home_token(index_base: str, base_dir: str | Path) -> str:
    """Replace every ``~`` in ``index_base`` with ``base_dir``."""

    base = str(base_dir)
    stripped = base.rstrip("/\\")
    # keep a bare filesystem root such as "/"
    replacement = stripped or base
    return index_base.replace(HOME_TOKEN, replacement)


__all__ = ["ENV_APP_BASE", "HOME_TOKEN", "application_base_dir", "substitute_home_token"]
