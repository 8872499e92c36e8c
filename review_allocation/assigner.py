from review_allocation.data_types import CandidateTeam, PullRequestContext
from review_allocation.github_client import RepositoryService


def assign_review_team_and_label(
    repository: RepositoryService,
    selected_team: CandidateTeam,
    context: PullRequestContext,
    label: str,
) -> None:
    """
    Request a review from the selected team, then label the pull request.

    The label is only added once the review request succeeded. Errors of
    either call are raised to the caller.
    """
    print(f"Creating review request for pull request {context.number}")
    repository.create_review_request(
        context.owner, context.repo, context.number, [selected_team.slug]
    )

    print(f"Adding label {label} to issue.")
    repository.add_labels(context.owner, context.repo, context.number, [label])
