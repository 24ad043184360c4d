"""Comment generation for AI-assigned labels."""

from urllib.parse import quote_plus

from .models import LabelSelection

DEFAULT_SERVER_URL = "https://github.com"


class CommentGenerator:
    """Generates GitHub comments explaining the labels the model assigned."""

    def __init__(
        self, repo_owner: str, repo_name: str, server_url: str = DEFAULT_SERVER_URL
    ):
        """Initialize the comment generator.

        Args:
            repo_owner: Owner of the repository the comment is posted in
            repo_name: Name of the repository
            server_url: Base URL of the GitHub instance, used for links
        """
        self.repo_owner = repo_owner
        self.repo_name = repo_name
        self.repo_url = f"{server_url.rstrip('/')}/{repo_owner}/{repo_name}"

    def label_url(self, name: str) -> str:
        """Link to the label's page, with the name URL-escaped."""
        return f"{self.repo_url}/labels/{quote_plus(name)}"

    def generate_label_comment(self, subject: str, selection: LabelSelection) -> str:
        """Generate the comment posted after labels were applied.

        Args:
            subject: Kind of item the labels were applied to ('issue', ...)
            selection: Labels chosen by the model with their explanations

        Returns:
            Markdown comment text ready for posting to GitHub
        """
        lines = []
        lines.append("**Automated Label Assignment:**")
        lines.append("")
        lines.append(
            "Hello there! 👋 This is an automated message from the "
            "ChatGPT Auto Labeler."
        )
        lines.append("")
        lines.append(
            f"The ChatGPT Auto Labeler has analyzed the title and content of "
            f"this {subject} and assigned the following labels:"
        )
        lines.append("")
        for label in selection.labels:
            lines.append(f"- **{label.name}**: {label.explanation}")

        if selection.explanation:
            lines.append("")
            lines.append(selection.explanation)

        lines.append("")
        lines.append(
            "If you have any concerns or need further clarification, please "
            "don't hesitate to reach out. You can discuss this further in the "
            f"[Issues]({self.repo_url}/issues) or "
            f"[Discussions]({self.repo_url}/discussions) section of our repository."
        )

        if selection.labels:
            lines.append("")
            lines.append(
                "You can click on the following links to quickly access each label:"
            )
            for label in selection.labels:
                lines.append(f"- [{label.name}]({self.label_url(label.name)})")

        lines.append("")
        lines.append(
            "*Note: This message is generated automatically, and the labels were "
            f"assigned based on the analysis of the {subject}'s content.*"
        )

        return "\n".join(lines)
