"""Tests for comment generator functionality."""

import pytest

from auto_labeler.ai.comment_generator import CommentGenerator
from auto_labeler.ai.models import ChosenLabel, LabelSelection


@pytest.fixture
def generator() -> CommentGenerator:
    return CommentGenerator("test-org", "test-repo")


@pytest.fixture
def sample_selection() -> LabelSelection:
    """Selection with two labels, one with a space in its name."""
    return LabelSelection(
        labels=[
            ChosenLabel(id="L1", name="bug", explanation="matches crash report"),
            ChosenLabel(
                id="L2",
                name="good first issue",
                explanation="Small, well-scoped change",
            ),
        ],
        explanation="Clear bug with an easy fix",
    )


class TestCommentGenerator:
    """Test CommentGenerator.generate_label_comment."""

    def test_label_lines(
        self, generator: CommentGenerator, sample_selection: LabelSelection
    ) -> None:
        comment = generator.generate_label_comment("issue", sample_selection)

        assert "- **bug**: matches crash report\n" in comment
        assert "- **good first issue**: Small, well-scoped change\n" in comment
        assert "Clear bug with an easy fix" in comment

    def test_subject_name(
        self, generator: CommentGenerator, sample_selection: LabelSelection
    ) -> None:
        comment = generator.generate_label_comment("discussion", sample_selection)

        assert comment.startswith("**Automated Label Assignment:**")
        assert "content of this discussion and assigned" in comment
        assert comment.endswith(
            "assigned based on the analysis of the discussion's content.*"
        )

    def test_links(
        self, generator: CommentGenerator, sample_selection: LabelSelection
    ) -> None:
        comment = generator.generate_label_comment("issue", sample_selection)

        assert "[Issues](https://github.com/test-org/test-repo/issues)" in comment
        assert (
            "[Discussions](https://github.com/test-org/test-repo/discussions)"
            in comment
        )
        assert "- [bug](https://github.com/test-org/test-repo/labels/bug)" in comment
        assert (
            "- [good first issue]"
            "(https://github.com/test-org/test-repo/labels/good+first+issue)"
            in comment
        )

    def test_label_url_escaping(self, generator: CommentGenerator) -> None:
        assert generator.label_url("area/ui & ux") == (
            "https://github.com/test-org/test-repo/labels/area%2Fui+%26+ux"
        )

    def test_custom_server_url(self, sample_selection: LabelSelection) -> None:
        generator = CommentGenerator(
            "test-org", "test-repo", server_url="https://ghe.example.com/"
        )

        comment = generator.generate_label_comment("issue", sample_selection)

        assert "https://ghe.example.com/test-org/test-repo/labels/bug" in comment

    def test_no_labels(self, generator: CommentGenerator) -> None:
        """Test an empty selection still explains itself without label links."""
        selection = LabelSelection(labels=[], explanation="Nothing fits")

        comment = generator.generate_label_comment("pull request", selection)

        assert "Nothing fits" in comment
        assert "quickly access each label" not in comment
        assert "this pull request" in comment
