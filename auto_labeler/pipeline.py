"""Labeling run: fetch labels, ask the model, apply labels, comment.

Each step is a hard gate. The only condition recovered from is an empty model
reply, which ends the run successfully without touching the item. Labels that
were already applied stay applied if posting the comment fails.
"""

import json
import logging
from contextlib import ExitStack
from enum import Enum

from .ai.comment_generator import CommentGenerator
from .ai.labeler import LabelingAssistant, LabelsRequest
from .ai.models import LabelSelection
from .config import RunConfig
from .deadline import Deadline
from .errors import EmptyResponse
from .events import EventKind, load_event
from .github_client.client import GitHubClient
from .github_client.graphql import GraphQLTransport
from .github_client.models import Label

logger = logging.getLogger(__name__)


class RunOutcome(str, Enum):
    """How a successful run ended."""

    LABELED = "labeled"
    NO_OP = "no-op"


def serialize_labels(labels: list[Label]) -> str:
    """JSON list of the available labels, as embedded in the prompt."""
    return json.dumps([label.model_dump() for label in labels], ensure_ascii=False)


def known_labels_only(
    selection: LabelSelection, available: list[Label]
) -> LabelSelection:
    """Drop chosen labels whose IDs were not offered to the model."""
    known_ids = {label.id for label in available}
    for chosen in selection.labels:
        if chosen.id not in known_ids:
            logger.warning(
                "Ignoring label %r: id %r is not defined in the repository",
                chosen.name,
                chosen.id,
            )
    return selection.restricted_to(known_ids)


def run(
    config: RunConfig,
    github: GitHubClient | None = None,
    assistant: LabelingAssistant | None = None,
) -> RunOutcome:
    """Label the item that triggered the event described by ``config``.

    Args:
        config: Run configuration
        github: GitHub client; built from ``config`` when omitted
        assistant: Labeling assistant; built from ``config`` when omitted

    Returns:
        ``RunOutcome.LABELED`` once labels are applied and the comment posted,
        ``RunOutcome.NO_OP`` when the model had nothing to suggest

    Raises:
        AutoLabelerError: Any step failed
    """
    deadline = Deadline(config.timeout)

    with ExitStack() as stack:
        if github is None:
            transport = stack.enter_context(
                GraphQLTransport(config.github_token, config.graphql_url)
            )
            github = GitHubClient(transport)
        if assistant is None:
            assistant = LabelingAssistant(
                config.openai_api_key, config.model, base_url=config.openai_base_url
            )
            stack.callback(assistant.close)

        return _run(config, deadline, github, assistant)


def _run(
    config: RunConfig,
    deadline: Deadline,
    github: GitHubClient,
    assistant: LabelingAssistant,
) -> RunOutcome:
    kind = EventKind.parse(config.event_name)
    payload = load_event(kind, config.event_path)
    logger.info(
        "Labeling %s %s: %s", kind.subject_name, payload.node_id, payload.title
    )

    available = github.fetch_repository_labels(
        config.repo_owner, config.repo_name, deadline=deadline
    )
    logger.info(
        "Found %d label(s) in %s/%s",
        len(available),
        config.repo_owner,
        config.repo_name,
    )

    request = LabelsRequest(
        payload=str(payload),
        labels=serialize_labels(available),
        details=config.details,
        subject=kind.subject_name,
    )
    try:
        selection = assistant.get_labels(request, deadline=deadline)
    except EmptyResponse:
        logger.info("The model returned an empty message, nothing to do.")
        return RunOutcome.NO_OP

    chosen = known_labels_only(selection, available)
    if selection.labels and not chosen.labels:
        logger.info("None of the suggested labels exist, nothing to do.")
        return RunOutcome.NO_OP

    github.replace_labels(
        payload.node_id, chosen.label_ids(), deadline=deadline
    )
    applied = ", ".join(label.name for label in chosen.labels)
    logger.info("Applied labels: %s", applied or "none")

    generator = CommentGenerator(
        config.repo_owner, config.repo_name, config.server_url
    )
    body = generator.generate_label_comment(kind.subject_name, chosen)
    add_comment = github.comment_function(kind)
    add_comment(payload.node_id, body, deadline=deadline)
    logger.info("Posted comment on %s %s", kind.subject_name, payload.node_id)

    return RunOutcome.LABELED
