"""Environment helpers for values mounted as files (Docker/Kubernetes secrets)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional

logger = logging.getLogger(__name__)

FILE_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """
    Expand ``KEY_FILE`` entries into ``KEY``.

    The database URI and the predictive configuration are commonly mounted
    as files. An already populated ``KEY`` always wins over its file.
    Unreadable files are logged and skipped.
    """
    env = os.environ if environ is None else environ

    for key, file_path in list(env.items()):
        if not key.endswith(FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(FILE_SUFFIX)]
        if env.get(target_key):
            continue
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )


load_secret_file_variables()
