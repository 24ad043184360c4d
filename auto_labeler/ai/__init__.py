"""AI label selection and comment generation."""

from .comment_generator import CommentGenerator
from .labeler import DEFAULT_MODEL, LabelingAssistant, LabelsRequest
from .models import ChosenLabel, LabelSelection

__all__ = [
    "DEFAULT_MODEL",
    "ChosenLabel",
    "CommentGenerator",
    "LabelSelection",
    "LabelingAssistant",
    "LabelsRequest",
]
