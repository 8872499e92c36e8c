"""
Review Team Allocation

Runs when a pull request is opened. Picks one child team of the parent
team and requests its review on the pull request, then adds a label.

BUSINESS LOGIC:
1. Lists the organization teams and keeps the children of PARENT_TEAM
2. Weighs each child team by its number of members
   - Someone in several child teams only counts for the first of them
3. Draws one team at random, proportionally to the weights
4. Requests a review from that team, then adds LABEL to the pull request

Environment Variables (action inputs, or plain names in a .env file):
    INPUT_GITHUB-TOKEN / GITHUB_TOKEN: Token allowed to read the org teams
    INPUT_ORGANIZATION / ORGANIZATION: Organization login
    INPUT_PARENT-TEAM / PARENT_TEAM: Name of the parent team
    INPUT_LABEL / LABEL: Label added to the pull request
    GITHUB_EVENT_PATH: Event payload of the triggering pull request

Exit Codes:
    0: Review requested and label added
    1: Nothing assigned (configuration, selection or GitHub error)
"""

import sys
import traceback
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# pylint: next-line: disable=wrong-import-position
from review_allocation.config_loader import (  # noqa: E402
    load_config,
    load_pull_request_context,
)
from review_allocation.errors import AllocationError  # noqa: E402
from review_allocation.github_client import get_github_client  # noqa: E402
from review_allocation.runner import run_allocation  # noqa: E402


def main() -> int:
    try:
        config = load_config()
        context = load_pull_request_context()

        with get_github_client(config) as client:
            run_allocation(config, context, client)
    except AllocationError as exc:
        stage = exc.stage or "configuration"
        print(f"\n❌ Review team allocation failed during {stage}: {exc}")
        traceback.print_exc()
        return 1
    except Exception as exc:  # noqa: BLE001
        print(f"\n❌ Review team allocation failed: {exc}")
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
