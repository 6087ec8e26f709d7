"""Prompt builders for the text and image generation services."""

from .types import Child, StoryRequest


def describe_children(children: list[Child]) -> str:
    """Join child descriptions for embedding in a prompt."""
    return ", ".join(child.describe() for child in children)


def build_story_prompt(request: StoryRequest) -> str:
    """Compose the story prompt sent to the text generation service."""
    return (
        f"Create a {request.story_length} personalised {request.category} story "
        f"about {request.topic}, including the following children: "
        f"{describe_children(request.children)}. "
        f"Story must have {request.sentences_per_paragraph} sentences per paragraph "
        f"and make the sentences {request.sentence_length}. "
        "Only show me the Title of the story and the Story. "
        "Respond in HTML using <p> for paragraphs."
    )


def build_image_prompt(title: str, request: StoryRequest) -> str:
    """Compose the illustration prompt from the story title and its children."""
    return (
        "Create a cute and heartwarming illustration image for the story titled: "
        f"{title}. For these characters: {describe_children(request.children)},"
    )
