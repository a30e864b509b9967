"""
Prompt construction for metadata generation.
"""

METADATA_PROMPT_TEMPLATE = """I need to generate tags, description, and title for the following article. Requirements:

1. Tags: {tags_prompt}

2. Description: {description_prompt}

3. Title: {title_prompt}

Please return in the following JSON format:
{{
    "tags": "tag1,tag2,tag3",
    "description": "brief summary",
    "title": "article title"
}}

Article content:

{content}"""


def build_metadata_prompt(
    content: str,
    tags_prompt: str,
    description_prompt: str,
    title_prompt: str,
) -> str:
    """
    Build the instruction prompt asking for a tags/description/title JSON object.

    Args:
        content: Prepared (possibly truncated) note content
        tags_prompt: Tag selection guidance
        description_prompt: Description guidance
        title_prompt: Title guidance

    Returns:
        Prompt text
    """
    return METADATA_PROMPT_TEMPLATE.format(
        tags_prompt=tags_prompt,
        description_prompt=description_prompt,
        title_prompt=title_prompt,
        content=content,
    )
