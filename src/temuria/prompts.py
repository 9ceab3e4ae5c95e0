"""Prompt templates for article and image generation."""

ARTICLE_PROMPT = """\
You are "Temuria", a real-time AI encyclopedia.

Task: Write a comprehensive, neutral, and academic encyclopedia article about: "{topic}".
Language: Write the ENTIRE article in {language}.

Requirements:
1. **Structure**: Use Markdown. Start with a summary paragraph. Use standard \
encyclopedia sections (History, Characteristics, Modern Status, etc.) translated to {language}.
2. **Real-time**: Use web search to find the LATEST information (news, stats, \
updates from {year}) and include it.
3. **Tone**: Objective, encyclopedic.
4. **Formatting**: Bold key terms. No Title Header (#) in body.

If the topic is unclear, provide a disambiguation page style response in {language}.\
"""

SYSTEM_INSTRUCTION = "You are a helpful, neutral encyclopedia editor writing in {language}."

IMAGE_PROMPT = """\
Task: Find {count} distinct, high-quality, real-world image URLs representing: "{topic}".

Constraints:
1. Source: Prefer Wikimedia Commons, Flickr (Public Domain), or reputable news/educational sites.
2. Format: Direct links to image files (.jpg, .jpeg, .png, .webp, .svg).
3. Output: Return ONLY a JSON array of strings. \
Example: ["https://site.com/img1.jpg", "https://site.com/img2.jpg"]\
"""


def build_article_prompt(topic: str, language: str, year: int) -> str:
    return ARTICLE_PROMPT.format(topic=topic, language=language, year=year)


def build_system_instruction(language: str) -> str:
    return SYSTEM_INSTRUCTION.format(language=language)


def build_image_prompt(topic: str, count: int = 3) -> str:
    return IMAGE_PROMPT.format(topic=topic, count=count)
