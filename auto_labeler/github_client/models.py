"""Pydantic models for GitHub data structures.

These models map to GitHub's GraphQL API v4 objects.
API Reference: https://docs.github.com/en/graphql/reference/objects#label
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Label(BaseModel):
    """GitHub label available in a repository.

    Serialised to JSON as the list of labels the model may choose from, so
    field order matters: it mirrors the GraphQL selection ``name description id``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the label (string)")
    description: str = Field(
        "", description="Short description of the label (string, may be empty)"
    )
    id: str = Field(..., description="Opaque GraphQL node identifier (string)")

    @field_validator("description", mode="before")
    @classmethod
    def null_description_to_empty(cls, v: str | None) -> str:
        """GitHub returns ``null`` for labels without a description."""
        return v or ""


class LabelConnection(BaseModel):
    """``labels(first: N)`` connection of a repository."""

    nodes: list[Label] = Field(default_factory=list)


class RepositoryLabels(BaseModel):
    """``repository { labels { ... } }`` selection."""

    labels: LabelConnection


class RepositoryLabelsData(BaseModel):
    """``data`` member of the fetch-labels query response."""

    repository: RepositoryLabels
