# syntax/auxiliary.py
"""
Do-support glue.

English questions without an auxiliary in the verb group need a dummy
"do" to carry tense and agreement ("Does John kiss Mary?"). Building the
inflected auxiliary is a collaborator's job; this module only decides
where it goes.
"""

from __future__ import annotations

import structlog

from realizer.core.domain.constituent import Group
from realizer.core.domain.context import Agreement
from realizer.core.domain.features import ClauseFeatures
from realizer.core.ports import AuxiliaryBuilder

logger = structlog.get_logger()


def has_auxiliary(features: ClauseFeatures) -> bool:
    """Modal, perfect, progressive or future tense already supply an auxiliary."""
    return features.has_auxiliary


def add_do_auxiliary(
    output: Group,
    builder: AuxiliaryBuilder,
    features: ClauseFeatures,
    agreement: Agreement,
) -> None:
    """Append a "do" verb phrase carrying the clause's tense and agreement."""
    aux = builder.build_do(features.effective_tense, agreement.person, agreement.number)
    output.append(aux)
    logger.debug(
        "do_auxiliary_added",
        tense=features.effective_tense.value,
        person=agreement.person.value,
        number=agreement.number.value,
    )
