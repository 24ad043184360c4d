"""Tests for label selection models."""

from auto_labeler.ai.models import ChosenLabel, LabelSelection


def test_parse_reply() -> None:
    selection = LabelSelection.model_validate_json(
        '{"labels": [{"id": "L1", "name": "bug", "explanation": "crash"},'
        ' {"id": "L2", "name": "ui", "explanation": "button"}],'
        ' "explanation": "two problems"}'
    )

    assert selection.label_ids() == ["L1", "L2"]
    assert selection.labels[1] == ChosenLabel(
        id="L2", name="ui", explanation="button"
    )
    assert selection.explanation == "two problems"


def test_missing_explanations_default_to_empty() -> None:
    selection = LabelSelection.model_validate_json(
        '{"labels": [{"id": "L1", "name": "bug"}]}'
    )

    assert selection.labels[0].explanation == ""
    assert selection.explanation == ""


def test_restricted_to_keeps_order() -> None:
    selection = LabelSelection(
        labels=[
            ChosenLabel(id="L3", name="c"),
            ChosenLabel(id="L1", name="a"),
            ChosenLabel(id="L2", name="b"),
        ]
    )

    assert selection.restricted_to({"L1", "L3"}).label_ids() == ["L3", "L1"]
    assert selection.label_ids() == ["L3", "L1", "L2"]
