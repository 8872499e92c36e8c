"""
Weighted Review Team Selection

Picks one child team of the parent team, with probability proportional
to its size.

BUSINESS LOGIC:
1. Candidate teams are the teams whose parent is the configured parent
   team (exact, case-sensitive name match), in the order GitHub lists
   them.

2. Each candidate gets a weight: its number of members, minus the members
   already counted by an EARLIER candidate. Someone in several teams only
   counts once, for the first of those teams. The order of the teams
   therefore matters, and the list must never be re-sorted once the
   weights are computed.

3. The weights are turned into a cumulative table. One random number
   "cap" in [0, total) is drawn and the first team whose cumulative count
   is >= cap is selected.

EXAMPLE:
Engineering has A (a1..a6), B (a1, b2, b3) and C (c1, c2, c3).

Team | Members counted | Weight | Cumulative
A    | a1..a6          | 6      | 6
B    | b2, b3          | 2      | 8   (a1 already counted by A)
C    | c1, c2, c3      | 3      | 11

total = 11, cap = 0..10:
- cap 0-6  -> A
- cap 7-8  -> B
- cap 9-10 -> C
"""

import random
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Protocol, Sequence, Set

from review_allocation.data_types import CandidateTeam, Team
from review_allocation.env_constants import MAX_ROSTER_WORKERS
from review_allocation.errors import SelectionError
from review_allocation.github_client import DirectoryService


class RandomSource(Protocol):
    def random(self) -> float: ...


def filter_teams(all_teams: Sequence[Team], parent_name: str) -> List[Team]:
    """Select the teams that have parent_name as their parent."""
    print(f"Looking for teams with {parent_name} as a parent.")

    return [
        team
        for team in all_teams
        if team.parent is not None and team.parent.name == parent_name
    ]


def attach_members(
    directory: DirectoryService,
    org: str,
    teams: Sequence[Team],
    max_workers: int = MAX_ROSTER_WORKERS,
) -> List[CandidateTeam]:
    """
    Fetch the members of every team.

    Rosters are fetched in parallel. The result keeps the order of the
    input teams whatever order the requests finish in, and the first
    failed fetch (in team order) is raised.

    Args:
        directory: Service used to list team members
        org: Organization login
        teams: Candidate teams, in processing order
        max_workers: Maximum number of concurrent roster requests

    Returns:
        List of CandidateTeam with members attached and no weights yet
    """
    print(f"Attaching members to {len(teams)} teams.")
    if not teams:
        return []

    with ThreadPoolExecutor(
        max_workers=max(1, min(max_workers, len(teams)))
    ) as executor:
        rosters = list(
            executor.map(
                lambda team: directory.list_team_members(org, team.slug),
                teams,
            )
        )

    return [
        CandidateTeam(team=team, members=list(members))
        for team, members in zip(teams, rosters)
    ]


def compute_weights(teams: List[CandidateTeam]) -> List[CandidateTeam]:
    """
    Set member_count and cumulative_count on each team, in list order.

    The function mutates directly the input teams and returns the same
    list. It is a single forward pass: a member already seen in an
    earlier team is not counted again.
    """
    seen_members: Set[str] = set()
    cumulative_count = 0

    for team in teams:
        adjust_count = 0
        for member in team.members:
            if member.login in seen_members:
                adjust_count += 1
            else:
                seen_members.add(member.login)

        team.member_count = len(team.members) - adjust_count
        cumulative_count += team.member_count
        team.cumulative_count = cumulative_count

    return teams


def select_team(
    teams: Sequence[CandidateTeam],
    rng: Optional[RandomSource] = None,
    cap: Optional[int] = None,
) -> CandidateTeam:
    """
    Select a team so that bigger teams are selected more often.

    Args:
        teams: Teams with weights computed by compute_weights(), in the
            same order
        rng: Source of uniform floats in [0, 1). Defaults to the
            random module.
        cap: Force the drawn value instead of drawing one (0 <= cap < total)

    Returns:
        The first team whose cumulative_count is >= the drawn cap

    Raises:
        SelectionError: if there are no teams, no members to weight by,
            or the forced cap is out of range
    """
    if not teams:
        raise SelectionError("No candidate teams to select from")

    total_team_members = teams[-1].cumulative_count
    if total_team_members <= 0:
        raise SelectionError(
            f"Candidate teams {[team.slug for team in teams]} have no members"
        )

    if cap is None:
        if rng is None:
            rng = random
        cap = int(total_team_members * rng.random())
    elif not 0 <= cap < total_team_members:
        raise SelectionError(
            f"Cap {cap} is outside of [0, {total_team_members})"
        )

    # cumulative_count is non-decreasing and ends at the total, so the
    # scan always finds a team for cap < total
    selected_team = next(
        team for team in teams if team.cumulative_count >= cap
    )

    print(f"Selected {selected_team.name}")
    return selected_team
