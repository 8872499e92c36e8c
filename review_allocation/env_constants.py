import os
from enum import Enum

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())

GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"


class ActionInputs(str, Enum):
    """Input names declared in action.yml"""

    GITHUB_TOKEN = "github-token"
    ORGANIZATION = "organization"
    PARENT_TEAM = "parent-team"
    LABEL = "label"


# Plain environment variables used when the inputs are not set
# (local runs with a .env file)
INPUT_FALLBACK_VARIABLES = {
    ActionInputs.GITHUB_TOKEN: "GITHUB_TOKEN",
    ActionInputs.ORGANIZATION: "ORGANIZATION",
    ActionInputs.PARENT_TEAM: "PARENT_TEAM",
    ActionInputs.LABEL: "LABEL",
}


def input_variable_name(action_input: ActionInputs) -> str:
    """
    Environment variable the Actions runner uses for an input.

    The runner upper-cases the name and replaces spaces with underscores,
    hyphens are kept ("github-token" -> "INPUT_GITHUB-TOKEN").
    """
    return "INPUT_" + action_input.value.replace(" ", "_").upper()


# Event payload written by the Actions runner
EVENT_PATH_VARIABLE = "GITHUB_EVENT_PATH"
API_URL_VARIABLE = "GITHUB_API_URL"

# GitHub REST API
REQUEST_TIMEOUT = 60  # seconds
PAGE_SIZE = 100  # GitHub maximum for list endpoints

# Roster fetches run in parallel, one request per candidate team
MAX_ROSTER_WORKERS = int(os.environ.get("MAX_ROSTER_WORKERS") or "8")
