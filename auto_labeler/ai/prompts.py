"""
Human-editable prompt templates for AI labeling.
Edit the prompts below to modify AI behavior.
"""

# ruff: noqa

LABELING_SYSTEM_PROMPT = """You are the developer.
Your task is to triage {subject}s on GitHub by assigning labels to them. You must analyse the title and content of the {subject} and assign it one or more of the available labels.
You will receive {subject}s in the following format:

Title: Some Title.
Body: Some body

Consider the context of the {subject} title and text when assigning labels.
"""

DETAILS_PROMPT = """Also consider the details when assigning labels:
{details}
"""

AVAILABLE_LABELS_PROMPT = """The following labels are available to you in json format:
{labels}
"""

OUTPUT_FORMAT_PROMPT = """Provide the answer as json. For example:
{
  "labels": [
    {
      "id": "LA_kwDOJrb9oM8AAAABTLsvXA",
      "name": "bug",
      "explanation": "Found a bug in the code."
    },
    {
      "id": "LA_kwDOJrb9oM8AAAABTLsvXQ",
      "name": "enhancement",
      "explanation": "Proposing an enhancement to the functionality."
    }
  ],
  "explanation": "A general explanation of the choice of labels"
}

The "id" field must be copied exactly from the "id" of one of the available labels, and "explanation" is an explanation of why you chose that label.
Answer with the json object only.
"""


def build_system_prompt(labels: str, details: str = "", subject: str = "item") -> str:
    """Assemble the system instructions sent ahead of the event text."""
    prompt = LABELING_SYSTEM_PROMPT.format(subject=subject)
    if details:
        prompt += DETAILS_PROMPT.format(details=details)
    prompt += AVAILABLE_LABELS_PROMPT.format(labels=labels)
    prompt += OUTPUT_FORMAT_PROMPT
    return prompt
