"""GitHub GraphQL client for labels and comments."""

import logging
from collections.abc import Callable

from pydantic import ValidationError

from ..deadline import Deadline
from ..errors import AutoLabelerError, DecodeError
from ..events import EventKind
from .graphql import GraphQLTransport, graphql_string
from .models import Label, RepositoryLabelsData

logger = logging.getLogger(__name__)

LABELS_PAGE_SIZE = 100

FETCH_LABELS_QUERY = (
    "query{{repository(owner:{owner},name:{name})"
    "{{labels(first:{first}){{nodes{{name description id}}}}}}}}"
)
REPLACE_LABELS_MUTATION = (
    "mutation{{addLabelsToLabelable(input:{{labelableId:{labelable_id},"
    "labelIds:[{label_ids}]}}){{clientMutationId}}}}"
)
ADD_COMMENT_MUTATION = (
    "mutation{{addComment(input:{{subjectId:{subject_id},body:{body}}})"
    "{{clientMutationId}}}}"
)
ADD_DISCUSSION_COMMENT_MUTATION = (
    "mutation{{addDiscussionComment(input:{{discussionId:{discussion_id},"
    "body:{body}}}){{clientMutationId}}}}"
)

CommentFunction = Callable[..., None]


class GitHubClient:
    """Label and comment operations on top of the GraphQL transport.

    Failures keep their type but their message is prefixed with the
    operation, e.g. ``failed to replace labels: bad request: ...``.
    """

    def __init__(self, transport: GraphQLTransport):
        self.transport = transport

    def fetch_repository_labels(
        self, owner: str, name: str, deadline: Deadline | None = None
    ) -> list[Label]:
        """Fetch up to 100 labels defined in a repository.

        Args:
            owner: Repository owner (user or organization)
            name: Repository name
            deadline: Run deadline bounding the request

        Returns:
            Labels in the order GitHub returned them
        """
        query = FETCH_LABELS_QUERY.format(
            owner=graphql_string(owner),
            name=graphql_string(name),
            first=LABELS_PAGE_SIZE,
        )
        try:
            data = self.transport.execute(query, deadline=deadline)
            try:
                labels = RepositoryLabelsData.model_validate(data).repository.labels
            except ValidationError as e:
                raise DecodeError(f"failed to decode labels: {e}") from e
        except AutoLabelerError as e:
            raise e.add_context("failed to fetch labels")

        logger.debug("Fetched %d labels from %s/%s", len(labels.nodes), owner, name)
        return labels.nodes

    def replace_labels(
        self,
        labelable_id: str,
        label_ids: list[str],
        deadline: Deadline | None = None,
    ) -> None:
        """Set the labels of an issue, pull request or discussion.

        Args:
            labelable_id: Node ID of the labelable item
            label_ids: Node IDs of the labels to apply; may be empty
            deadline: Run deadline bounding the request
        """
        mutation = REPLACE_LABELS_MUTATION.format(
            labelable_id=graphql_string(labelable_id),
            label_ids=",".join(graphql_string(label_id) for label_id in label_ids),
        )
        try:
            self.transport.execute(mutation, deadline=deadline)
        except AutoLabelerError as e:
            raise e.add_context("failed to replace labels")
        logger.debug("Applied %d label(s) to %s", len(label_ids), labelable_id)

    def add_comment(
        self, subject_id: str, body: str, deadline: Deadline | None = None
    ) -> None:
        """Comment on an issue or pull request."""
        mutation = ADD_COMMENT_MUTATION.format(
            subject_id=graphql_string(subject_id), body=graphql_string(body)
        )
        try:
            self.transport.execute(mutation, deadline=deadline)
        except AutoLabelerError as e:
            raise e.add_context("failed to add comment")

    def add_discussion_comment(
        self, discussion_id: str, body: str, deadline: Deadline | None = None
    ) -> None:
        """Comment on a discussion."""
        mutation = ADD_DISCUSSION_COMMENT_MUTATION.format(
            discussion_id=graphql_string(discussion_id), body=graphql_string(body)
        )
        try:
            self.transport.execute(mutation, deadline=deadline)
        except AutoLabelerError as e:
            raise e.add_context("failed to add discussion comment")

    def comment_function(self, kind: EventKind) -> CommentFunction:
        """Pick the comment mutation matching the subject of an event."""
        if kind is EventKind.DISCUSSION:
            return self.add_discussion_comment
        return self.add_comment
