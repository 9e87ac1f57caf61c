"""Argument judges.

A judge turns the text of an argument (and optionally the argument it
answers) into a 0-100 score. Judges raise ``JudgeError`` for every failure
mode so callers only have one thing to catch; scoring is always best effort.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

import openai
from openai import OpenAI

from .prompts import SYSTEM_PROMPT, build_score_prompt

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100

_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)


class JudgeError(Exception):
    """Scoring is unavailable for this argument."""


class ArgumentJudge(ABC):
    """Abstract base class for argument judges."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Judge name/identifier."""

    @abstractmethod
    def score_argument(self, content: str, previous_content: Optional[str] = None) -> int:
        """Return a score between 0 and 100 for ``content``."""


class DisabledJudge(ArgumentJudge):
    """Judge used when no scoring backend is configured."""

    @property
    def name(self) -> str:
        return "disabled"

    def score_argument(self, content: str, previous_content: Optional[str] = None) -> int:
        raise JudgeError("No judge is configured")


class OpenAIJudge(ArgumentJudge):
    """Scores arguments with an OpenAI-compatible chat completions API."""

    def __init__(self, client: OpenAI, model: str, temperature: float = 0.2):
        self._client = client
        self.model = model
        self.temperature = temperature

    @property
    def name(self) -> str:
        return f"openai:{self.model}"

    def score_argument(self, content: str, previous_content: Optional[str] = None) -> int:
        prompt = build_score_prompt(content, previous_content)
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.OpenAIError as e:
            raise JudgeError(f"Judge request failed: {e}") from e

        if not response.choices:
            raise JudgeError("Judge returned no choices")
        reply = response.choices[0].message.content or ""
        logger.debug(f"Raw judge reply (first 200 chars): {reply[:200]}")
        return parse_score(reply)


def parse_score(reply: str) -> int:
    """Extract the score from a judge reply.

    Accepts a bare JSON object, one wrapped in a markdown code fence, or one
    embedded in surrounding prose.
    """
    text = reply.strip()
    fenced = _FENCED_JSON.search(text)
    if fenced:
        text = fenced.group(1)

    start = text.find("{")
    if start < 0:
        raise JudgeError(f"No JSON object in judge reply: {reply[:100]!r}")

    # raw_decode stops at the end of the object, ignoring trailing prose
    try:
        data, _ = json.JSONDecoder().raw_decode(text, start)
    except json.JSONDecodeError as e:
        raise JudgeError(f"Malformed judge reply: {e}") from e

    if not isinstance(data, dict) or "score" not in data:
        raise JudgeError("Judge reply has no score")

    raw = data["score"]
    # bool is an int subclass; "true" is not a score
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise JudgeError(f"Judge score is not a number: {raw!r}")
    if not MIN_SCORE <= raw <= MAX_SCORE:
        raise JudgeError(f"Judge score out of range: {raw}")
    return int(round(raw))


def build_judge(config) -> ArgumentJudge:
    """Create the judge described by the Flask config."""
    api_key = config.get("OPENAI_API_KEY")
    if not api_key:
        logger.warning("No OPENAI_API_KEY configured; arguments will not be scored.")
        return DisabledJudge()

    client = OpenAI(
        api_key=api_key,
        base_url=config.get("JUDGE_BASE_URL") or None,
        timeout=config.get("JUDGE_TIMEOUT_SEC", 10),
        max_retries=config.get("JUDGE_MAX_RETRIES", 1),
    )
    judge = OpenAIJudge(
        client,
        model=config.get("JUDGE_MODEL", "gpt-4o-mini"),
        temperature=config.get("JUDGE_TEMPERATURE", 0.2),
    )
    logger.info(f"Argument judge configured: {judge.name}")
    return judge
