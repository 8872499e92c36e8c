"""Runs the whole allocation for one pull request event."""

from contextlib import contextmanager
from typing import Iterator, Optional

from review_allocation.assigner import assign_review_team_and_label
from review_allocation.data_types import (
    AllocationConfig,
    CandidateTeam,
    PullRequestContext,
)
from review_allocation.errors import AllocationError
from review_allocation.github_client import GitHubService
from review_allocation.selection import (
    RandomSource,
    attach_members,
    compute_weights,
    filter_teams,
    select_team,
)


@contextmanager
def stage(name: str) -> Iterator[None]:
    """Tag any error raised inside the block with the stage name."""
    try:
        yield
    except AllocationError as exc:
        if exc.stage is None:
            exc.stage = name
        raise
    except Exception as exc:  # noqa: BLE001
        raise AllocationError(
            str(exc) or type(exc).__name__, stage=name
        ) from exc


def run_allocation(
    config: AllocationConfig,
    context: PullRequestContext,
    client: GitHubService,
    rng: Optional[RandomSource] = None,
) -> CandidateTeam:
    """
    Select a child team of the parent team and assign it to the pull
    request.

    Args:
        config: Action inputs
        context: Pull request that triggered the run
        client: Directory and repository service
        rng: Random source for the selection (tests)

    Returns:
        The team that was requested for review
    """
    print(f"Looking for teams in {config.organization}")

    with stage("list teams"):
        all_teams = client.list_teams(config.organization)

    with stage("filter teams"):
        teams = filter_teams(all_teams, config.parent_team)

    with stage("attach members"):
        candidate_teams = attach_members(client, config.organization, teams)

    with stage("compute weights"):
        compute_weights(candidate_teams)

    print("\n📊 Team weights:")
    for team in candidate_teams:
        print(
            f"   {team.name}: {team.member_count} member(s), "
            f"cumulative {team.cumulative_count}"
        )
    print()

    with stage("select team"):
        selected_team = select_team(candidate_teams, rng=rng)

    with stage("assign review"):
        assign_review_team_and_label(
            client, selected_team, context, config.label
        )

    print(
        f"✅ Requested review from {selected_team.name} on "
        f"{context.owner}/{context.repo}#{context.number}"
    )
    return selected_team
