"""Test doubles for the GitHub services."""

from typing import Dict, List, Optional, Sequence, Tuple

from review_allocation.data_types import CandidateTeam, Team, TeamMember
from review_allocation.errors import CollaboratorError


def make_team(slug: str, parent: Optional[str] = None) -> Team:
    return Team(
        slug=slug,
        name=slug,
        parent=Team(slug=parent.lower(), name=parent) if parent else None,
    )


def make_candidate_teams(
    rosters: Sequence[Tuple[str, List[str]]]
) -> List[CandidateTeam]:
    """Build unweighted candidate teams from (slug, logins) pairs."""
    return [
        CandidateTeam(
            team=make_team(slug),
            members=[TeamMember(login=login) for login in logins],
        )
        for slug, logins in rosters
    ]


class FixedRandom:
    """Random source returning the given values in a loop."""

    def __init__(self, *values: float) -> None:
        self.values = list(values)
        self.index = 0

    def random(self) -> float:
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value


class FakeGitHubClient:
    """
    In-memory directory and repository service.

    Args:
        teams: Teams returned by list_teams
        rosters: Member logins per team slug
        failing_calls: Method names that raise CollaboratorError
    """

    def __init__(
        self,
        teams: List[Team],
        rosters: Dict[str, List[str]],
        failing_calls: Sequence[str] = (),
    ) -> None:
        self.teams = teams
        self.rosters = rosters
        self.failing_calls = set(failing_calls)
        self.calls: List[tuple] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.failing_calls:
            raise CollaboratorError(f"{name} failed", status_code=422)

    def list_teams(self, org: str) -> List[Team]:
        self._record("list_teams", org)
        return list(self.teams)

    def list_team_members(self, org: str, team_slug: str) -> List[TeamMember]:
        self._record("list_team_members", org, team_slug)
        return [TeamMember(login=login) for login in self.rosters[team_slug]]

    def create_review_request(self, owner, repo, pr_number, team_slugs):
        self._record("create_review_request", owner, repo, pr_number, team_slugs)
        return {"number": pr_number}

    def add_labels(self, owner, repo, issue_number, labels):
        self._record("add_labels", owner, repo, issue_number, labels)
        return [{"name": label} for label in labels]

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]
