# LLM Package
"""
Chat-completion suggestion source.

Example:
    >>> from stylist.infrastructure.llm import build_suggestion_source
    >>> source = build_suggestion_source(config.llm)  # None without API keys
"""

from stylist.infrastructure.llm.chat_suggestion_source import (
    PROVIDER_MODELS,
    ChatSuggestionSource,
    build_styling_prompt,
    build_suggestion_source,
    extract_message_content,
    parse_completion,
)

__all__ = [
    "PROVIDER_MODELS",
    "ChatSuggestionSource",
    "build_styling_prompt",
    "build_suggestion_source",
    "extract_message_content",
    "parse_completion",
]
