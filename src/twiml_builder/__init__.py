"""twiml_builder -- fluent construction of TwiML response documents.

Public API re-exports for convenient access::

    from twiml_builder import Verb

    Verb().say("Hello", voice="woman")
"""

from ._version import __version__
from .config import Settings
from .exceptions import BuilderStateError, InvalidArgumentError, MarkupError, TwiMLBuilderError
from .models import BuilderMode, Options, Text, VerbArg
from .verb import Verb

__all__ = [
    "__version__",
    # Core
    "Verb",
    "BuilderMode",
    "Settings",
    # Argument variants
    "Text",
    "Options",
    "VerbArg",
    # Exceptions
    "TwiMLBuilderError",
    "InvalidArgumentError",
    "BuilderStateError",
    "MarkupError",
]
