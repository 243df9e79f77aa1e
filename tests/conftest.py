# tests/conftest.py
import pytest
import structlog

from engines.english import EnglishEngine
from lexicon.index import load_lexicon
from realizer.core.domain.models import ClauseSpec, NounPhraseSpec
from realizer.shared.container import Container


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any structlog configuration a test (e.g. the CLI) applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def en_index():
    """The real English lexicon from data/lexicon."""
    return load_lexicon("en")


@pytest.fixture
def engine(en_index):
    """A fully wired English engine."""
    return EnglishEngine(en_index)


@pytest.fixture
def lexicon(engine):
    return engine.lexicon


@pytest.fixture
def clauses(engine):
    """The clause realizer with the English collaborators."""
    return engine.clauses


@pytest.fixture
def render(engine):
    """Shortcut: ClauseSpec -> sentence text."""
    return engine.render


@pytest.fixture
def container():
    """
    Dependency Injection Container for testing.
    Tests override providers on it; overrides are reset afterwards.
    """
    container = Container()
    yield container
    container.reset_override()


@pytest.fixture
def john_kisses_mary():
    """Provides the canonical transitive clause."""
    return ClauseSpec(subjects=["John"], verb="kiss", object="Mary")


@pytest.fixture
def man_gives_woman_flower():
    """Provides a ditransitive clause with full noun phrases."""
    return ClauseSpec(
        subjects=[NounPhraseSpec(head="man", determiner="the")],
        verb="give",
        indirect_object=NounPhraseSpec(head="woman", determiner="the"),
        object=NounPhraseSpec(head="flower", determiner="the"),
    )
