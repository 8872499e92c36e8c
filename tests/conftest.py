"""Test fixtures for pytest."""

from typing import Dict, Generator, List

import pytest

from review_allocation.data_types import (
    AllocationConfig,
    PullRequestContext,
    Team,
)
from tests.utils import FakeGitHubClient, make_team

ENGINEERING_ROSTERS: Dict[str, List[str]] = {
    "A": ["a1", "a2", "a3", "a4", "a5", "a6"],
    "B": ["a1", "b2", "b3"],
    "C": ["c1", "c2", "c3"],
}

ORG_TEAMS: List[Team] = [
    make_team("Engineering"),
    make_team("A", parent="Engineering"),
    make_team("Design"),
    make_team("B", parent="Engineering"),
    make_team("Web", parent="Design"),
    make_team("C", parent="Engineering"),
]

CONFIG = AllocationConfig(
    github_token="token",
    organization="org",
    parent_team="Engineering",
    label="needs-review",
)

CONTEXT = PullRequestContext(owner="org", repo="app", number=42)


@pytest.fixture(scope="function")
def fake_client() -> Generator[FakeGitHubClient, None, None]:
    """Provide a fake GitHub client with the Engineering teams."""
    rosters = dict(ENGINEERING_ROSTERS)
    rosters.update({"Engineering": [], "Design": ["d1"], "Web": ["w1"]})
    yield FakeGitHubClient(ORG_TEAMS, rosters)
