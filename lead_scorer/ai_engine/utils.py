"""
lead_scorer/ai_engine/utils.py — Shared AI helper utilities.

Provides:
  - build_chat_llm()         : factory for the LangChain ChatOpenAI client
  - join_for_prompt()        : render a list of strings inline for a prompt
  - parse_intent_response()  : tolerant parsing of the two-line Intent/Reasoning reply
"""

import logging
import re
from collections.abc import Sequence

from langchain_openai import ChatOpenAI

from lead_scorer.config import settings

logger = logging.getLogger(__name__)

DEFAULT_INTENT = "Medium"
DEFAULT_REASONING = "Unable to determine fit."
MIN_REASONING_CHARS = 10

_INTENT_PATTERN = re.compile(r"intent:\s*(high|medium|low)", re.IGNORECASE)
_REASONING_PREFIX = re.compile(r"reasoning:\s*", re.IGNORECASE)


def build_chat_llm() -> ChatOpenAI:
    """
    Build a LangChain ChatOpenAI client from settings.

    openai_base_url may point at any OpenAI-compatible endpoint; when unset
    the official API is used.
    """
    return ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        temperature=settings.ai_temperature,
        max_tokens=settings.ai_max_tokens,
        timeout=settings.ai_timeout_seconds,
        max_retries=settings.ai_max_retries,
    )


def join_for_prompt(items: Sequence[str]) -> str:
    return ", ".join(items)


def parse_intent_response(text: str | None) -> tuple[str, str]:
    """
    Extract (intent, reasoning) from the model's reply.

    Expected shape:
        Intent: High
        Reasoning: CTO at a B2B SaaS company that matches the ICP.

    Missing or unrecognized intent falls back to "Medium". When the reasoning
    line is empty or suspiciously short, the line right after it is used if
    that one is long enough; otherwise a generic placeholder is returned.
    """
    lines = [line.strip() for line in (text or "").split("\n")]

    intent = DEFAULT_INTENT
    reasoning = DEFAULT_REASONING

    for line in lines:
        lowered = line.lower()
        if lowered.startswith("intent:"):
            match = _INTENT_PATTERN.search(line)
            if match:
                intent = match.group(1).capitalize()
        elif lowered.startswith("reasoning:"):
            reasoning = _REASONING_PREFIX.sub("", line, count=1).strip()

    # Some models put the reasoning on the line below the label
    if reasoning == DEFAULT_REASONING or len(reasoning) < MIN_REASONING_CHARS:
        index = next(
            (i for i, line in enumerate(lines) if line.lower().startswith("reasoning:")),
            None,
        )
        if index is not None and index + 1 < len(lines):
            next_line = lines[index + 1]
            if len(next_line) > MIN_REASONING_CHARS:
                reasoning = next_line

    if reasoning == DEFAULT_REASONING:
        logger.warning("Could not find reasoning in LLM output: %s", (text or "")[:200])

    return intent, reasoning
