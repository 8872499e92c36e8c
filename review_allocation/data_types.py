"""Data type definitions for the review team allocation."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Team:
    """
    A GitHub team as listed by the organization teams endpoint.

    Attributes:
        slug: Team slug, unique within the organization
        name: Display name of the team
        parent: Parent team, None for top-level teams
    """

    slug: str
    name: str
    parent: Optional["Team"] = None

    @classmethod
    def from_payload(cls, payload: dict) -> "Team":
        parent = payload.get("parent")
        return cls(
            slug=payload["slug"],
            name=payload["name"],
            parent=cls.from_payload(parent) if parent else None,
        )


@dataclass
class TeamMember:
    login: str

    @classmethod
    def from_payload(cls, payload: dict) -> "TeamMember":
        return cls(login=payload["login"])


@dataclass
class CandidateTeam:
    """
    A child team of the parent team, with its roster and selection weight.

    Attributes:
        team: The underlying GitHub team
        members: Team roster, in the order returned by GitHub
        member_count: Members not already counted by an earlier team
        cumulative_count: Running sum of member_count up to this team
    """

    team: Team
    members: List[TeamMember] = field(default_factory=list)
    member_count: int = field(default=0)
    cumulative_count: int = field(default=0)

    @property
    def slug(self) -> str:
        return self.team.slug

    @property
    def name(self) -> str:
        return self.team.name


@dataclass
class PullRequestContext:
    """The pull request that triggered the run."""

    owner: str
    repo: str
    number: int


@dataclass
class AllocationConfig:
    github_token: str
    organization: str
    parent_team: str
    label: str
    api_url: str = field(default="https://api.github.com")
