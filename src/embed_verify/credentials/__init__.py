from .resolver import DEFAULT_TOKEN_ENV_VAR, DEFAULT_TOKEN_FILE, resolve_hf_token

__all__ = [
    "DEFAULT_TOKEN_ENV_VAR",
    "DEFAULT_TOKEN_FILE",
    "resolve_hf_token",
]
