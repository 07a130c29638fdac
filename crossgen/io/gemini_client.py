"""HTTP access to Gemini for writing crossword clues."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..core.exceptions import CrosswordError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

GENERATE_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiAPIError(CrosswordError):
    """Raised when the Gemini API cannot produce clue text."""


@dataclass
class GeminiSettings:
    """Model and request knobs; the key and model may come from the environment."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    timeout_seconds: float = 60.0
    temperature: float = 0.7

    @classmethod
    def from_env(
        cls,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
    ) -> "GeminiSettings":
        api_key = os.environ.get(api_key_env)
        if not api_key:
            raise GeminiAPIError(f"Missing Gemini API key in environment variable {api_key_env}")
        return cls(api_key=api_key, model_name=os.environ.get(model_env, model_name))


def clue_payload(prompt: str, temperature: float) -> Dict[str, Any]:
    """Request body asking for a JSON answer to ``prompt``."""

    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": temperature,
            "responseMimeType": "application/json",
        },
    }


def first_text(payload: Dict[str, Any]) -> Optional[str]:
    for candidate in payload.get("candidates") or []:
        for part in (candidate.get("content") or {}).get("parts") or []:
            if part.get("text"):
                return part["text"]
    return None


class GeminiClient:
    """Sends clue prompts over a reusable ``requests`` session."""

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        session: Optional[requests.Session] = None,
        settings: Optional[GeminiSettings] = None,
    ) -> None:
        self.settings = settings or GeminiSettings.from_env(model_name, api_key_env, model_env)
        self._session = session or requests.Session()

    @property
    def model_name(self) -> str:
        return self.settings.model_name

    def generate_text(self, prompt: str) -> str:
        url = GENERATE_URL.format(model=self.settings.model_name)
        LOGGER.debug("Requesting clues from %s", self.settings.model_name)
        try:
            response = self._session.post(
                url,
                params={"key": self.settings.api_key},
                json=clue_payload(prompt, self.settings.temperature),
                timeout=self.settings.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:  # pragma: no cover - network failure
            raise GeminiAPIError(f"Gemini request failed: {exc}") from exc
        except ValueError as exc:
            raise GeminiAPIError(f"Gemini returned a non-JSON body: {exc}") from exc

        if not isinstance(data, dict):
            raise GeminiAPIError("Gemini response body is not a JSON object")
        text = first_text(data)
        if text is None:
            feedback = data.get("promptFeedback")
            LOGGER.warning("Gemini returned no text (feedback: %s)", feedback)
            raise GeminiAPIError("Gemini API response missing text candidates")
        return text
