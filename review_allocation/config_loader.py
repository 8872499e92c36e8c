"""
Configuration Loader

Loads the action inputs and the triggering pull request from the
environment the GitHub Actions runner provides. Local runs can put the
same values in a .env file (see env_constants.INPUT_FALLBACK_VARIABLES).
"""
import json
import os
from typing import Mapping, Optional

from review_allocation.data_types import AllocationConfig, PullRequestContext
from review_allocation.env_constants import (
    API_URL_VARIABLE,
    EVENT_PATH_VARIABLE,
    GITHUB_API_URL,
    INPUT_FALLBACK_VARIABLES,
    ActionInputs,
    input_variable_name,
)
from review_allocation.errors import ConfigurationError


def get_input(
    action_input: ActionInputs, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Read an action input, falling back to the plain variable name."""
    if environ is None:
        environ = os.environ

    value = environ.get(input_variable_name(action_input), "").strip()
    if not value:
        value = environ.get(
            INPUT_FALLBACK_VARIABLES[action_input], ""
        ).strip()
    return value


def load_config(
    environ: Optional[Mapping[str, str]] = None
) -> AllocationConfig:
    """
    Build the allocation configuration from the environment.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        AllocationConfig with every required value set

    Raises:
        ConfigurationError: if any required input is missing
    """
    if environ is None:
        environ = os.environ

    values = {
        action_input: get_input(action_input, environ)
        for action_input in ActionInputs
    }
    missing = [
        action_input.value
        for action_input, value in values.items()
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Missing required input(s): {', '.join(missing)}"
        )

    api_url = environ.get(API_URL_VARIABLE, "").strip() or GITHUB_API_URL

    return AllocationConfig(
        github_token=values[ActionInputs.GITHUB_TOKEN],
        organization=values[ActionInputs.ORGANIZATION],
        parent_team=values[ActionInputs.PARENT_TEAM],
        label=values[ActionInputs.LABEL],
        api_url=api_url.rstrip("/"),
    )


def load_pull_request_context(
    event_path: Optional[str] = None,
) -> PullRequestContext:
    """
    Read the pull request from the Actions event payload.

    Args:
        event_path: Path of the event JSON file. If None, uses
            GITHUB_EVENT_PATH environment variable.

    Raises:
        ConfigurationError: if the payload is missing or is not a
            pull request event
    """
    if event_path is None:
        event_path = os.environ.get(EVENT_PATH_VARIABLE)

    if not event_path:
        raise ConfigurationError(
            f"{EVENT_PATH_VARIABLE} is not set, cannot find the pull request"
        )

    try:
        with open(event_path, encoding="utf-8") as event_file:
            payload = json.load(event_file)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(
            f"Could not read event payload {event_path}: {exc}"
        ) from exc

    try:
        return PullRequestContext(
            owner=payload["repository"]["owner"]["login"],
            repo=payload["repository"]["name"],
            number=int(payload["pull_request"]["number"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Event payload is not a pull request event: missing {exc}"
        ) from exc
