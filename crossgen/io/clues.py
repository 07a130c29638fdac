"""Clue generation interfaces for placed words that arrived without clue text."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Dict, List, Protocol, Sequence

from ..core.exceptions import CrosswordError
from ..core.models import Clue
from ..utils.logger import get_logger
from .gemini_client import GeminiClient


LOGGER = get_logger(__name__)


@dataclass
class ClueRequest:
    clue_id: str
    word: str
    direction: str
    length: int


class ClueGenerator(Protocol):
    def generate(self, requests: List[ClueRequest], language: str = "English") -> Dict[str, str]:
        """Return mapping from clue_id to clue text."""


class GeminiClueGenerator:
    """LLM clue generator using Gemini."""

    CLUE_RULES = (
        "You are an expert crossword clue writer. "
        "Write all clues in {language}. "
        "Mandatory rules for EVERY clue:\n"
        "1. The clue must define the solution word unambiguously.\n"
        "2. Do NOT include the solution word (or obvious fragments) in the clue.\n"
        "3. The clue must be between 2 and 8 words.\n"
        "Respond as a JSON list [{{clue_id, clue}}]."
    )

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        gemini_client: GeminiClient | None = None,
    ) -> None:
        self.model_name = os.environ.get(model_env, model_name)
        self.api_key_env = api_key_env
        self.model_env = model_env
        self._client = gemini_client

    def generate(self, requests: List[ClueRequest], language: str = "English") -> Dict[str, str]:
        if not requests:
            return {}
        prompt = self._render_prompt(requests, language)
        client = self._client or GeminiClient(
            model_name=self.model_name,
            api_key_env=self.api_key_env,
            model_env=self.model_env,
        )
        self._client = client
        response_text = client.generate_text(prompt)
        return self._parse_response(response_text)

    @classmethod
    def _render_prompt(cls, requests: List[ClueRequest], language: str = "English") -> str:
        payload = [request.__dict__ for request in requests]
        rules = cls.CLUE_RULES.format(language=language)
        return f"{rules}\nRequests: {json.dumps(payload, ensure_ascii=False)}"

    @staticmethod
    def _parse_response(text: str) -> Dict[str, str]:
        if not text:
            return {}
        # Models like to wrap JSON in a fenced block.
        stripped = text.strip()
        if stripped.startswith("```"):
            stripped = stripped.strip("`")
            if stripped.startswith("json"):
                stripped = stripped[len("json"):]
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            LOGGER.warning("Gemini clue payload not JSON; falling back to empty")
            return {}
        if not isinstance(data, list):
            LOGGER.warning("Gemini clue payload is %s, not a list; falling back to empty", type(data).__name__)
            return {}
        result: Dict[str, str] = {}
        for entry in data:
            if not isinstance(entry, dict):
                continue
            clue_id = entry.get("clue_id")
            clue = entry.get("clue")
            if clue_id and clue:
                result[str(clue_id)] = clue
        return result


class TemplateClueGenerator:
    """Simple fallback clue writer."""

    def generate(self, requests: List[ClueRequest], language: str = "English") -> Dict[str, str]:
        results = {}
        for req in requests:
            results[req.clue_id] = f"{req.length}-letter word starting with {req.word[:1]}"
        return results


def clue_requests(clues: Sequence[Clue]) -> List[ClueRequest]:
    """Requests for every clue whose text is still empty."""

    return [
        ClueRequest(
            clue_id=str(clue.number),
            word=clue.answer,
            direction=clue.direction.value,
            length=clue.length,
        )
        for clue in clues
        if not clue.text
    ]


def fill_missing_clues(
    clues: Sequence[Clue],
    generator: ClueGenerator,
    fallback: ClueGenerator | None = None,
) -> int:
    """Write generated text into clues that have none; return how many were filled."""

    requests = clue_requests(clues)
    if not requests:
        return 0

    try:
        texts = generator.generate(requests)
    except (CrosswordError, ValueError) as exc:
        LOGGER.warning("Clue generator %s failed: %s", generator, exc)
        texts = {}

    missing = [req for req in requests if req.clue_id not in texts]
    if missing and fallback is not None:
        texts.update(fallback.generate(missing))

    filled = 0
    for clue in clues:
        if clue.text:
            continue
        text = texts.get(str(clue.number))
        if text:
            clue.text = text
            filled += 1
    return filled
