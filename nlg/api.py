# nlg/api.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import structlog

from realizer.core.domain.exceptions import UnsupportedLanguageError
from realizer.core.domain.models import ClauseSpec
from realizer.core.ports import SentenceEngine
from realizer.core.use_cases.realize_sentence import RealizeSentence
from realizer.shared.config import settings
from realizer.shared.container import container

logger = structlog.get_logger()

ClauseInput = Union[ClauseSpec, Mapping[str, Any]]


# ---------------------------------------------------------------------------
# Public data models
# ---------------------------------------------------------------------------


@dataclass
class GenerationResult:
    """
    Standardized output from the frontend API.
    """

    text: str
    lang: str
    clause: ClauseSpec
    debug_info: Optional[Dict[str, Any]] = None
    generation_time_ms: float = 0.0


# ---------------------------------------------------------------------------
# Engine registry
# ---------------------------------------------------------------------------

# Language code -> engine factory. One reference engine ships today.
ENGINE_FACTORIES: Dict[str, Callable[[], SentenceEngine]] = {
    "en": container.english_engine,
}


def supported_languages() -> List[str]:
    return sorted(ENGINE_FACTORIES)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class NLGSession:
    """
    Stateful session that caches engines per language.

    Use this in long-running services or batch jobs.
    """

    def __init__(self, *, preload_langs: Optional[List[str]] = None) -> None:
        self._use_cases: Dict[str, RealizeSentence] = {}
        if preload_langs:
            for lang in preload_langs:
                self._get_use_case(lang)

    # public API -------------------------------------------------------------

    def realise(
        self,
        clause: ClauseInput,
        *,
        lang: Optional[str] = None,
        debug: bool = False,
    ) -> GenerationResult:
        """
        Main entry point: clause → text.

        ``clause`` may be a ClauseSpec or a plain dict in the same shape
        (e.g. loaded from JSON).
        """
        lang = lang or settings.DEFAULT_LANGUAGE
        spec = clause if isinstance(clause, ClauseSpec) else ClauseSpec.model_validate(dict(clause))

        sentence = self._get_use_case(lang).execute(spec, debug=debug)

        return GenerationResult(
            text=sentence.text,
            lang=sentence.lang_code,
            clause=spec,
            debug_info=sentence.debug_info,
            generation_time_ms=sentence.generation_time_ms,
        )

    # internal helpers -------------------------------------------------------

    def _get_use_case(self, lang: str) -> RealizeSentence:
        """
        Retrieve or initialize the use case (and its engine) for a language.
        """
        if lang in self._use_cases:
            return self._use_cases[lang]

        factory = ENGINE_FACTORIES.get(lang)
        if factory is None:
            raise UnsupportedLanguageError(lang)

        logger.debug("engine_loaded", lang=lang)
        use_case = RealizeSentence(engine=factory())
        self._use_cases[lang] = use_case
        return use_case


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------

# Default process-global session for simple/stateless usage.
_default_session = NLGSession()


def realise(
    clause: ClauseInput,
    *,
    lang: Optional[str] = None,
    debug: bool = False,
) -> GenerationResult:
    """
    Stateless convenience wrapper around `NLGSession.realise`.

    Suitable for scripts, tests, and simple integrations.
    """
    return _default_session.realise(clause, lang=lang, debug=debug)


def generate(
    lang: str,
    clause: ClauseInput,
    *,
    debug: bool = False,
) -> GenerationResult:
    """
    Same as `realise`, with the language first.
    """
    return _default_session.realise(clause, lang=lang, debug=debug)
