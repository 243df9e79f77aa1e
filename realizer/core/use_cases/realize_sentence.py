# realizer/core/use_cases/realize_sentence.py
import time
from typing import Any, Dict

import structlog

from realizer.core.domain.context import RealizationContext
from realizer.core.domain.exceptions import DomainError, InvalidClauseError
from realizer.core.domain.models import ClauseSpec, Sentence
from realizer.core.ports import SentenceEngine

logger = structlog.get_logger()


class RealizeSentence:
    """
    Use Case: Converts an abstract clause into a sentence.

    Responsibilities:
    1. Validates the clause.
    2. Runs the language engine (word order, then orthography).
    3. Times and logs the realization.
    4. Handles domain-level errors.
    """

    def __init__(self, engine: SentenceEngine):
        # We inject the port, not the concrete engine
        self.engine = engine

    def execute(self, clause: ClauseSpec, *, debug: bool = False) -> Sentence:
        lang_code = self.engine.lang_code
        qtype = clause.features.interrogative_type
        logger.info(
            "realization_started",
            lang=lang_code,
            interrogative_type=qtype.value if qtype else None,
        )
        started = time.perf_counter()

        try:
            # 1. Validation
            self._validate_clause(clause)

            # 2. Execution
            context = RealizationContext()
            tree = self.engine.realize(clause, context)
            text = self.engine.format(tree, context)

            elapsed_ms = (time.perf_counter() - started) * 1000.0
            debug_info: Dict[str, Any] = {
                "tokens": tree.tokens(),
                "interrogative": context.interrogative,
            }

            logger.info("realization_success", lang=lang_code, text_preview=text[:50])
            return Sentence(
                text=text,
                lang_code=lang_code,
                debug_info=debug_info if debug else None,
                generation_time_ms=elapsed_ms,
            )

        except DomainError:
            # Re-raise known domain errors (InvalidClause, LexemeNotFound, ...)
            raise
        except Exception as e:
            logger.error("realization_failed", error=str(e), exc_info=True)
            raise DomainError(f"Unexpected realization failure: {str(e)}")

    def _validate_clause(self, clause: ClauseSpec) -> None:
        """
        Business rules checked before realization.
        """
        verb = clause.verb_phrase()
        if verb is None or not verb.verb.strip():
            raise InvalidClauseError("a clause needs a verb")

        if clause.features.flag("passive") and clause.object is None:
            raise InvalidClauseError("a passive clause needs an object to promote")
