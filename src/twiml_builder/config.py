"""Builder configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    """Serialization settings, configurable via environment variables.

    Environment variables:
        TWIML_PRETTY_PRINT: Indent the output document ("1" or "true")
        TWIML_ENCODING: Encoding named in the XML declaration (default "UTF-8")
    """

    pretty_print: bool = field(
        default_factory=lambda: os.getenv("TWIML_PRETTY_PRINT", "").lower() in ("1", "true")
    )
    encoding: str = field(default_factory=lambda: os.getenv("TWIML_ENCODING", "UTF-8"))
