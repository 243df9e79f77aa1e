"""
morphology/english.py

Inflection helpers for English.

This module is intentionally **stateless**: irregular forms come from the
lexicon (``forms`` bundles in data/lexicon/en_lexicon.json) and are passed
in by the caller. Only a handful of regular spelling rules live here; no
attempt is made at general English morphology.

It is responsible for:

- Finite verb forms (present third person -s, past -ed, be / have)
- Participles (-ing, past participle)
- Personal pronouns by person / number / gender / case
- Noun plurals
- Indefinite article selection (a/an)

Typical usage from the phrase realizer:

    from morphology import english as emorph

    emorph.present_form("kiss", "third", "singular")        # "kisses"
    emorph.past_form("give", "third", "singular",
                     {"past": "gave"})                      # "gave"
    emorph.pronoun("third", "singular", "feminine",
                   "accusative")                            # "her"
"""

from typing import Dict, Mapping, Optional, Tuple

_VOWELS = "aeiou"
_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh", "o")

EMPTY_FORMS: Mapping[str, str] = {}


def _is_consonant_y(word: str) -> bool:
    return len(word) > 1 and word.endswith("y") and word[-2] not in _VOWELS


# ---------------------------------------------------------------------------
# 1. Verbs
# ---------------------------------------------------------------------------

_BE_PRESENT: Dict[Tuple[str, str], str] = {
    ("first", "singular"): "am",
    ("second", "singular"): "are",
    ("third", "singular"): "is",
}
_BE_PAST_SINGULAR = {"first": "was", "third": "was"}


def is_third_singular(person: str, number: str) -> bool:
    return person == "third" and number == "singular"


def third_singular(lemma: str) -> str:
    """kiss -> kisses, carry -> carries, dance -> dances."""
    if lemma.endswith(_SIBILANT_ENDINGS):
        return lemma + "es"
    if _is_consonant_y(lemma):
        return lemma[:-1] + "ies"
    return lemma + "s"


def present_form(
    lemma: str,
    person: str,
    number: str,
    forms: Mapping[str, str] = EMPTY_FORMS,
) -> str:
    """
    Present tense form agreeing with person / number.

    ``forms["present3"]`` overrides the third person singular.
    """
    if lemma == "be":
        if number == "plural":
            return "are"
        return _BE_PRESENT[(person, number)]
    if not is_third_singular(person, number):
        return lemma
    if "present3" in forms:
        return forms["present3"]
    if lemma == "have":
        return "has"
    return third_singular(lemma)


def regular_past(lemma: str) -> str:
    """dance -> danced, carry -> carried, kiss -> kissed."""
    if lemma.endswith("e"):
        return lemma + "d"
    if _is_consonant_y(lemma):
        return lemma[:-1] + "ied"
    return lemma + "ed"


def past_form(
    lemma: str,
    person: str,
    number: str,
    forms: Mapping[str, str] = EMPTY_FORMS,
) -> str:
    if lemma == "be":
        if number == "plural":
            return "were"
        return _BE_PAST_SINGULAR.get(person, "were")
    if "past" in forms:
        return forms["past"]
    if lemma == "have":
        return "had"
    return regular_past(lemma)


def past_participle(lemma: str, forms: Mapping[str, str] = EMPTY_FORMS) -> str:
    if "past_participle" in forms:
        return forms["past_participle"]
    if lemma == "be":
        return "been"
    if "past" in forms:
        return forms["past"]
    if lemma == "have":
        return "had"
    return regular_past(lemma)


def present_participle(lemma: str, forms: Mapping[str, str] = EMPTY_FORMS) -> str:
    """dance -> dancing, die -> dying, see -> seeing."""
    if "present_participle" in forms:
        return forms["present_participle"]
    if lemma.endswith("ie"):
        return lemma[:-2] + "ying"
    if lemma.endswith("e") and not lemma.endswith("ee") and len(lemma) > 2:
        return lemma[:-1] + "ing"
    return lemma + "ing"


# ---------------------------------------------------------------------------
# 2. Pronouns
# ---------------------------------------------------------------------------

# (person, number, gender) -> (nominative, accusative)
_PRONOUNS: Dict[Tuple[str, str, Optional[str]], Tuple[str, str]] = {
    ("first", "singular", None): ("I", "me"),
    ("first", "plural", None): ("we", "us"),
    ("second", "singular", None): ("you", "you"),
    ("second", "plural", None): ("you", "you"),
    ("third", "singular", "masculine"): ("he", "him"),
    ("third", "singular", "feminine"): ("she", "her"),
    ("third", "singular", "neuter"): ("it", "it"),
    ("third", "plural", None): ("they", "them"),
}


def pronoun(person: str, number: str, gender: Optional[str], case: str = "nominative") -> str:
    """
    Personal pronoun. Gender only matters in the third person singular,
    where it defaults to neuter.
    """
    if person == "third" and number == "singular":
        key = (person, number, gender or "neuter")
    else:
        key = (person, number, None)
    nominative, accusative = _PRONOUNS[key]
    return accusative if case == "accusative" else nominative


# ---------------------------------------------------------------------------
# 3. Nouns and articles
# ---------------------------------------------------------------------------


def plural(noun: str, forms: Mapping[str, str] = EMPTY_FORMS) -> str:
    """woman -> women (lexicon), box -> boxes, city -> cities."""
    if "plural" in forms:
        return forms["plural"]
    if noun.endswith(("s", "x", "z", "ch", "sh")):
        return noun + "es"
    if _is_consonant_y(noun):
        return noun[:-1] + "ies"
    return noun + "s"


def choose_indefinite_article(next_word: str) -> str:
    """a/an by the first letter of the following word."""
    word = next_word.strip()
    if word and word[0].lower() in _VOWELS:
        return "an"
    return "a"
