# -*- coding: utf-8 -*-
import os
from typing import List, Optional

from loguru import logger


def getenv_or_action(
    env_name: str, *, action: str = "raise", default: Optional[str] = None
) -> Optional[str]:
    """Returns an environment variable or executes an action if it's missing.

    Args:
        env_name: The environment variable name.
        action: What to do when the variable is not set: "raise", "warn" or "ignore".
        default: Value returned when the variable is not set.
    """
    if action not in ("raise", "warn", "ignore"):
        raise ValueError(f"Invalid action: {action}")
    value = os.getenv(env_name, default)
    if value is None:
        if action == "raise":
            raise EnvironmentError(f"Environment variable {env_name} is not set.")
        if action == "warn":
            logger.warning(f"Warning: Environment variable {env_name} is not set.")
    return value


def getenv_list_or_action(
    env_name: str, *, action: str = "raise", default: Optional[str] = None
) -> List[str]:
    """Same as getenv_or_action, splitting a comma separated value into a list."""
    value = getenv_or_action(env_name, action=action, default=default)
    if value is None:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def getenv_bool(env_name: str, default: bool) -> bool:
    value = getenv_or_action(env_name, action="ignore")
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


from .base import *  # noqa: E402, F401, F403
