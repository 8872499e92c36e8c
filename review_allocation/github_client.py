"""
GitHub REST client for the directory (teams, members) and repository
(review requests, labels) calls made during an allocation run.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Protocol

import requests

from review_allocation.data_types import AllocationConfig, Team, TeamMember
from review_allocation.env_constants import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    PAGE_SIZE,
    REQUEST_TIMEOUT,
)
from review_allocation.errors import CollaboratorError


class DirectoryService(Protocol):
    def list_teams(self, org: str) -> List[Team]: ...

    def list_team_members(self, org: str, team_slug: str) -> List[TeamMember]: ...


class RepositoryService(Protocol):
    def create_review_request(
        self, owner: str, repo: str, pr_number: int, team_slugs: List[str]
    ) -> Any: ...

    def add_labels(
        self, owner: str, repo: str, issue_number: int, labels: List[str]
    ) -> Any: ...


class GitHubService(DirectoryService, RepositoryService, Protocol):
    """Both services, as provided by a single GitHub client."""


class GitHubClient:
    """
    Implements DirectoryService and RepositoryService on the GitHub API.

    Failed calls are not retried: any transport error or non-2xx
    response raises CollaboratorError.
    """

    def __init__(
        self,
        token: str,
        api_url: str = GITHUB_API_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": GITHUB_ACCEPT_HEADER,
            }
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _request(
        self,
        method: str,
        url: str,
        params: Optional[dict] = None,
        payload: Any = None,
    ) -> requests.Response:
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=payload,
                timeout=REQUEST_TIMEOUT,
            )
        except requests.exceptions.RequestException as exc:
            raise CollaboratorError(f"{method} {url} failed: {exc}") from exc

        if not response.ok:
            try:
                message = response.json().get("message", response.reason)
            except ValueError:
                message = response.reason
            raise CollaboratorError(
                f"{method} {url} returned {response.status_code}: {message}",
                status_code=response.status_code,
            )
        return response

    def _get_all_pages(self, path: str) -> List[dict]:
        """GET a list endpoint, following the Link rel="next" headers."""
        url: Optional[str] = f"{self.api_url}{path}"
        params: Optional[dict] = {"per_page": PAGE_SIZE}
        items: List[dict] = []

        while url:
            response = self._request("GET", url, params=params)
            items.extend(response.json())
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string
            params = None

        return items

    def list_teams(self, org: str) -> List[Team]:
        return [
            Team.from_payload(team)
            for team in self._get_all_pages(f"/orgs/{org}/teams")
        ]

    def list_team_members(self, org: str, team_slug: str) -> List[TeamMember]:
        return [
            TeamMember.from_payload(member)
            for member in self._get_all_pages(
                f"/orgs/{org}/teams/{team_slug}/members"
            )
        ]

    def create_review_request(
        self, owner: str, repo: str, pr_number: int, team_slugs: List[str]
    ) -> dict:
        response = self._request(
            "POST",
            f"{self.api_url}/repos/{owner}/{repo}/pulls/{pr_number}"
            "/requested_reviewers",
            payload={"team_reviewers": team_slugs},
        )
        return response.json()

    def add_labels(
        self, owner: str, repo: str, issue_number: int, labels: List[str]
    ) -> List[dict]:
        response = self._request(
            "POST",
            f"{self.api_url}/repos/{owner}/{repo}/issues/{issue_number}"
            "/labels",
            payload={"labels": labels},
        )
        return response.json()


@contextmanager
def get_github_client(config: AllocationConfig) -> Iterator[GitHubClient]:
    """Open a GitHub client for the run and close its session afterwards."""
    client = GitHubClient(config.github_token, api_url=config.api_url)
    try:
        yield client
    finally:
        client.close()
