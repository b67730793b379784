"""
Pluggable LLM backend module.
Backends never raise on provider failures; they return an LLMResult the
assistant checks before falling back to the knowledge base matcher.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from config import LLM_TEMPERATURE, LLM_TIMEOUT, OPENAI_API_KEY, OPENAI_MODEL
from core.knowledge_base import ProcessRecord
from core.prompts import NO_ANSWER_SENTINEL, build_system_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LLMResult:
    """Outcome of a generation attempt: either an answer or the reason there is none."""
    answer: Optional[str] = None
    source: str = ""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.answer is not None

    @classmethod
    def success(cls, answer: str, source: str) -> "LLMResult":
        return cls(answer=answer, source=source)

    @classmethod
    def failure(cls, reason: str) -> "LLMResult":
        return cls(reason=reason)


class LLMBackend(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def generate(self, message: str, corpus: Sequence[ProcessRecord]) -> LLMResult:
        """Answer a user message grounded on the given processes."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend name."""
        pass


class OfflineBackend(LLMBackend):
    """
    No model configured. Every message goes straight to the knowledge base matcher.
    """

    @property
    def name(self) -> str:
        return "offline"

    def generate(self, message: str, corpus: Sequence[ProcessRecord]) -> LLMResult:
        return LLMResult.failure("no LLM backend configured")


class OpenAIBackend(LLMBackend):
    """
    OpenAI Chat Completions backend.
    Requires OPENAI_API_KEY environment variable.
    """

    def __init__(
        self,
        model: str = OPENAI_MODEL,
        api_key: str = OPENAI_API_KEY,
        timeout: float = LLM_TIMEOUT,
        temperature: float = LLM_TEMPERATURE,
    ):
        self._model = model
        self._api_key = api_key
        self._timeout = timeout
        self._temperature = temperature
        self._client = None

    @property
    def name(self) -> str:
        return "openai"

    def _get_client(self):
        if self._client is None:
            from openai import OpenAI
            self._client = OpenAI(api_key=self._api_key, timeout=self._timeout)
        return self._client

    def generate(self, message: str, corpus: Sequence[ProcessRecord]) -> LLMResult:
        if not self._api_key:
            return LLMResult.failure("OPENAI_API_KEY is not set")

        try:
            completion = self._get_client().chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=[
                    {"role": "system", "content": build_system_prompt(corpus)},
                    {"role": "user", "content": message},
                ],
            )
            answer = (completion.choices[0].message.content or "").strip() if completion.choices else ""
        except Exception as e:
            logger.warning("OpenAI request failed: %s", e)
            return LLMResult.failure(f"OpenAI request failed: {e}")

        if not answer:
            return LLMResult.failure("empty completion")
        if NO_ANSWER_SENTINEL in answer:
            return LLMResult.failure("model could not answer from the knowledge base")

        return LLMResult.success(answer, source=self.name)


def get_llm_backend(backend_name: str = "offline") -> LLMBackend:
    """Factory to create an LLM backend by name."""
    backends = {
        "offline": OfflineBackend,
        "openai": OpenAIBackend,
    }

    if backend_name not in backends:
        raise ValueError(
            f"Unknown LLM backend: {backend_name}. Available: {list(backends.keys())}"
        )

    return backends[backend_name]()
