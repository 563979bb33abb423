# src/embed_verify/credentials/resolver.py

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_FILE = ".hf_token"
DEFAULT_TOKEN_ENV_VAR = "HF_TOKEN"


def resolve_hf_token(
    *,
    token_file: str = DEFAULT_TOKEN_FILE,
    env_var: str = DEFAULT_TOKEN_ENV_VAR,
    default: str | None = None,
    directory: str | Path | None = None,
) -> str | None:
    """Resolve the Hugging Face hub token for this run.

    Sources are checked in order and the first non-empty one wins:

    1. stripped contents of ``token_file`` inside ``directory``
       (the current working directory when not given)
    2. the ``env_var`` environment variable
    3. ``default``

    Never raises. With no ``default`` the result is ``None`` and models
    are fetched anonymously.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    token = _read_token_file(base / token_file)
    if token:
        logger.info("Using hub token from %s", base / token_file)
        return token

    token = os.environ.get(env_var, "").strip()
    if token:
        logger.info("Using hub token from $%s", env_var)
        return token

    if default:
        logger.info("Using fallback hub token")
        return default

    logger.info("No hub token configured, fetching models anonymously")
    return None


def _read_token_file(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip() or None
    except OSError as e:
        logger.debug("Token file %s not readable: %s", path, e)
        return None
