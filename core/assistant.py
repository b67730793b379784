"""
Oracle assistant.
Orchestrates the answer chain: LLM → knowledge base matcher → help text.
"""

import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from config import (
    COMMAND_SUGGESTIONS,
    HELP_TOPICS,
    KNOWLEDGE_BASE_PATH,
    LLM_BACKEND,
    MIN_SCORE,
)
from core.knowledge_base import (
    KnowledgeBaseError,
    KnowledgeBaseUnavailableError,
    ProcessRecord,
    load_processes,
)
from core.llm_backend import LLMBackend, LLMResult, get_llm_backend
from core.matcher import find_best_match
from core.prompts import (
    HELP_CATEGORY,
    HELP_TITLE,
    LLM_CATEGORY,
    LLM_TITLE,
    build_help_message,
)

logger = logging.getLogger(__name__)


class OracleAssistant:
    """
    Answers questions about internal processes.

    Usage:
        assistant = OracleAssistant()
        assistant.initialize()
        result = assistant.ask("Como solicitar férias?")
    """

    def __init__(
        self,
        knowledge_base_path: Optional[Path] = None,
        llm_backend_name: Optional[str] = None,
        llm_backend: Optional[LLMBackend] = None,
        min_score: float = MIN_SCORE,
    ):
        self._kb_path = knowledge_base_path or KNOWLEDGE_BASE_PATH
        self._llm_backend_name = llm_backend_name or LLM_BACKEND
        self._llm: Optional[LLMBackend] = llm_backend
        self._min_score = min_score

        self._corpus: Tuple[ProcessRecord, ...] = ()
        self._is_initialized = False

    def initialize(self) -> None:
        """Load the knowledge base and set up the LLM backend."""
        print("\n=== Initializing Oracle ===")
        start = time.time()

        print("[1/2] Loading knowledge base...")
        self.reload()

        print("[2/2] Setting up LLM backend...")
        if self._llm is None:
            self._llm = get_llm_backend(self._llm_backend_name)

        elapsed = time.time() - start
        self._is_initialized = True
        print(f"\n=== Oracle ready ({elapsed:.1f}s) ===")
        print(f"  Processes: {len(self._corpus)}")
        print(f"  LLM Backend: {self._llm.name}")
        print()

    def reload(self) -> None:
        """
        Re-read the knowledge base file. A load failure leaves an empty corpus,
        so questions are rejected as unavailable until the file is fixed.
        """
        try:
            self._corpus = load_processes(self._kb_path)
        except KnowledgeBaseError as e:
            logger.error("Could not load knowledge base: %s", e)
            self._corpus = ()

    @staticmethod
    def expand_command(message: str) -> str:
        """Replace a bare command prefix such as '/ferias' with its suggestion label."""
        key = message.strip().lower()
        for suggestion in COMMAND_SUGGESTIONS:
            if key == suggestion["prefix"]:
                return suggestion["label"]
        return message

    def ask(self, message: str) -> Dict:
        """
        Answer a message.
        Tries the LLM first, then the knowledge base matcher, then the help text.
        """
        if not self._is_initialized:
            raise RuntimeError("Assistant not initialized. Call initialize() first.")

        raw_message = message
        message = message.strip()
        if not message:
            raise ValueError("Message cannot be empty.")

        if not self._corpus:
            raise KnowledgeBaseUnavailableError("No processes loaded.")

        question = self.expand_command(message)

        llm_result = self._generate(question)
        if llm_result.ok:
            return {
                "question": message,
                "answer": llm_result.answer,
                "categoria": LLM_CATEGORY,
                "titulo": LLM_TITLE,
                "source": "llm",
                "process_id": None,
            }
        logger.info("LLM unavailable (%s), using knowledge base", llm_result.reason)

        best_match = find_best_match(question, self._corpus, self._min_score)
        if best_match is not None:
            return {
                "question": message,
                "answer": best_match.answer,
                "categoria": best_match.category,
                "titulo": best_match.title,
                "source": "knowledge_base",
                "process_id": best_match.id,
            }

        return {
            "question": message,
            "answer": build_help_message(raw_message, HELP_TOPICS),
            "categoria": HELP_CATEGORY,
            "titulo": HELP_TITLE,
            "source": "help",
            "process_id": None,
        }

    def _generate(self, question: str) -> LLMResult:
        """Run the LLM backend. Any exception it raises counts as a failed attempt."""
        try:
            return self._llm.generate(question, self._corpus)
        except Exception as e:
            logger.exception("LLM backend %s raised", self._llm.name)
            return LLMResult.failure(str(e))

    def get_suggestions(self) -> List[Dict]:
        return [dict(s) for s in COMMAND_SUGGESTIONS]

    def get_stats(self) -> Dict:
        """Return assistant statistics."""
        return {
            "processes": len(self._corpus),
            "categories": sorted({record.category for record in self._corpus}),
            "llm_backend": self._llm.name if self._llm else "not initialized",
            "knowledge_base": str(self._kb_path),
            "min_score": self._min_score,
        }

    @property
    def corpus(self) -> Tuple[ProcessRecord, ...]:
        return self._corpus

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized
