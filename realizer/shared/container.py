# realizer/shared/container.py
from dependency_injector import containers, providers

from engines.english import EnglishEngine
from lexicon.index import load_lexicon
from realizer.core.use_cases.realize_sentence import RealizeSentence
from realizer.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Acts as the "Switchboard" connecting the English engine to the use case.
    """

    config = providers.Object(settings)

    # 1. Lexical resources
    lexicon_index = providers.Singleton(
        load_lexicon,
        "en",
        settings.LEXICON_DIR,
    )

    # 2. Engine (collaborators + clause realizer)
    english_engine = providers.Singleton(
        EnglishEngine,
        index=lexicon_index,
        strict=settings.STRICT_LEXICON,
    )

    # 3. Use Cases
    realize_sentence_use_case = providers.Factory(
        RealizeSentence,
        engine=english_engine,
    )


# Global Container Instance
container = Container()
