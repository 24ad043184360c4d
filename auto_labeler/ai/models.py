"""Pydantic models for AI labeling responses."""

from pydantic import BaseModel, ConfigDict, Field


class ChosenLabel(BaseModel):
    """A label picked by the model, with the reason for picking it."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Node ID echoed from the available labels")
    name: str = Field(description="Label name")
    explanation: str = Field(default="", description="Why this label applies")


class LabelSelection(BaseModel):
    """Structured reply of the labeling model."""

    model_config = ConfigDict(frozen=True)

    labels: list[ChosenLabel] = Field(
        default_factory=list, description="Labels to apply, in reply order"
    )
    explanation: str = Field(
        default="", description="General explanation of the choice of labels"
    )

    def label_ids(self) -> list[str]:
        """Node IDs of the chosen labels."""
        return [label.id for label in self.labels]

    def restricted_to(self, known_ids: set[str]) -> "LabelSelection":
        """Copy of this selection without labels outside ``known_ids``."""
        return self.model_copy(
            update={"labels": [lbl for lbl in self.labels if lbl.id in known_ids]}
        )
