"""Input variants and builder state for the verb builder.

``Text`` and ``Options`` are the two shapes a verb argument may take.
Raw ``str``/number and mapping arguments are classified into them by
:mod:`twiml_builder.arguments`; callers may also construct them directly.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias, Union


@dataclass(frozen=True)
class Text:
    """Primary payload of a verb: text to speak, audio URL, number or URL."""

    value: str


@dataclass(frozen=True)
class Options:
    """Named options for a verb, rendered as element attributes."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy of the caller's mapping.
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))


VerbArg: TypeAlias = Union[Text, Options]


class BuilderMode(enum.Enum):
    """How a :class:`~twiml_builder.verb.Verb` wraps its output.

    ``STANDALONE``: the root is created lazily by the first verb call and
    the document is finished by that same call.

    ``CHAINED``: the root is created eagerly, a callback appends children,
    and the document is finished when the callback returns.
    """

    STANDALONE = "standalone"
    CHAINED = "chained"


# ---------------------------------------------------------------------------
# Verb defaults
# ---------------------------------------------------------------------------

SAY_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {"voice": "man", "language": "en", "loop": 1}
)
PLAY_DEFAULTS: Mapping[str, Any] = MappingProxyType({"loop": 1})

ROOT_TAG = "Response"
PAUSE_TAG = "Pause"
