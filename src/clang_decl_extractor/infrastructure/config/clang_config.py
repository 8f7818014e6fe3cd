#!/usr/bin/env python3

"""Configuration for the clang frontend invocations."""

import os
import shlex

# Default configuration values
DEFAULT_CONFIG = {
    # Frontend executable (name on PATH or absolute path)
    "CLANG_BINARY": "clang",

    # Extra flags for both passes, shell-quoted (e.g. "-std=c11 -x c")
    "EXTRA_ARGS": "",

    # Passes slower than this are logged at INFO level
    "LOG_SLOW_PASS_MS": 5000,
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Every key can be overridden through ``CLANG_<KEY>``; ``CLANG_BINARY`` is
    read as-is.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_name = key if key.startswith("CLANG_") else f"CLANG_{key}"
        env_value = os.getenv(env_name)
        if env_value is not None:
            # Convert to the type of the default
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            elif isinstance(config[key], int):
                try:
                    config[key] = int(env_value)
                except ValueError:
                    pass
            else:
                config[key] = env_value

    return config


def get_extra_args() -> list[str]:
    """Get the configured extra frontend flags as an argument list."""
    return shlex.split(get_config()["EXTRA_ARGS"])
