"""
Prompt for text moderation.
"""

SYSTEM_PROMPT = "You are a helpful assistant."

SENSITIVE_THEMES = (
    "nsfw",
    "sexual sentiment",
    "sex related words",
    "domestic abuse",
    "child abuse",
    "substance use",
    "racism",
    "violence",
    "guns",
    "suicidal",
    "vaccinations",
    "talks about deep social issues",
    "inequality",
    "abortions",
    "liberals vs conservatives",
)

AFFIRMATIVE_TOKEN = "true"

PROMPT_TEMPLATE = (
    "If this text has any of the following themes: {themes}, return only TRUE, "
    "if it doesn't return FALSE. Text: {text}"
)


def build_prompt(text: str) -> str:
    """Fill the moderation prompt with the theme list and the extracted text."""
    return PROMPT_TEMPLATE.format(themes=", ".join(SENSITIVE_THEMES), text=text)


def parse_verdict(response: str) -> bool:
    """Return True when the model answer contains the affirmative token."""
    return AFFIRMATIVE_TOKEN in response.lower()
