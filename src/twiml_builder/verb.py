"""Verb -- fluent builder for TwiML response documents.

Each verb method appends one element (or, for ``say``/``play`` with the
``pause`` option, a run of elements) under a single ``<Response>`` root::

    Verb().say("The time is 9:35 PM.", loop=3)

    verb = Verb(lambda v: v.say("greetings").pause(length=2).hangup())
    verb.response

Without a callback the builder is STANDALONE: the first verb call opens the
root, appends its element and returns the finished document. With a
callback the builder is CHAINED: the root is opened up front, the callback
receives the builder, and the document is finished when the callback
returns. Serialization and escaping are delegated to ``lxml.etree``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from lxml import etree

from .arguments import loop_count, normalize, single_options, to_attributes
from .config import Settings
from .exceptions import BuilderStateError, MarkupError
from .models import PAUSE_TAG, PLAY_DEFAULTS, ROOT_TAG, SAY_DEFAULTS, BuilderMode, Options

logger = logging.getLogger(__name__)

OptionsArg = Mapping[str, Any] | Options | None


class Verb:
    """Build a TwiML document from a sequence of verb calls.

    Parameters
    ----------
    callback:
        Optional callable receiving the builder.  When given, every verb it
        invokes is appended to one shared root and :attr:`response` holds
        the finished document once the constructor returns.
    settings:
        Serialization settings; read from the environment when omitted.
    """

    def __init__(
        self,
        callback: Callable[[Verb], object] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.response: str | None = None
        self._root: etree._Element | None = None

        if callback is None:
            self.mode = BuilderMode.STANDALONE
            return

        self.mode = BuilderMode.CHAINED
        root = self._open_root()
        callback(self)
        self.response = self._serialize(root)

    def __str__(self) -> str:
        return self.response or ""

    # -----------------------------------------------------------------------
    # Output wrapping
    # -----------------------------------------------------------------------

    def _open_root(self) -> etree._Element:
        self._root = etree.Element(ROOT_TAG)
        logger.debug("Opened <%s> root (%s)", ROOT_TAG, self.mode.value)
        return self._root

    def _serialize(self, root: etree._Element) -> str:
        encoding = self.settings.encoding
        data = etree.tostring(
            root,
            xml_declaration=True,
            encoding=encoding,
            pretty_print=self.settings.pretty_print,
        )
        logger.debug("Serialized <%s> with %d children", ROOT_TAG, len(root))
        return data.decode(encoding)

    def _output(self, build: Callable[[etree._Element], None]) -> Verb | str:
        """Run *build* under the root, opening and finishing it if standalone."""
        if self.response is not None:
            raise BuilderStateError("document already finished; create a new Verb")
        if self.mode is BuilderMode.CHAINED:
            if self._root is None:
                raise BuilderStateError("chained builder has no open root")
            build(self._root)
            return self
        root = self._open_root()
        build(root)
        self.response = self._serialize(root)
        return self.response

    @staticmethod
    def _add(
        root: etree._Element,
        tag: str,
        text: str | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        # Built detached so a rejected element never reaches the root.
        try:
            element = etree.Element(tag, to_attributes(attributes or {}))
            if text is not None:
                element.text = text
        except (TypeError, ValueError) as exc:
            raise MarkupError(tag, f"Cannot render <{tag}>: {exc}") from exc
        root.append(element)
        logger.debug("Appended <%s> %s", tag, dict(element.attrib))

    def _loop_with_pause(
        self,
        root: etree._Element,
        count: int,
        tag: str,
        text: str | None,
        attributes: Mapping[str, Any],
    ) -> None:
        last = count - 1
        for i in range(count):
            self._add(root, tag, text, attributes)
            if i != last:
                self._add(root, PAUSE_TAG)

    def append(
        self,
        tag: str,
        text: str | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> Verb | str:
        """Append a ``<tag>`` element under the root.

        Option values are stringified as for verb methods (``None`` drops
        the attribute, booleans become ``true``/``false``).  Returns the
        builder in chained mode and the finished document otherwise.
        Raises :class:`~twiml_builder.exceptions.MarkupError` when the tag,
        an attribute name or the text cannot appear in XML.
        """
        return self._output(lambda root: self._add(root, tag, text, attributes))

    def append_looped(
        self,
        count: int,
        tag: str,
        text: str | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> Verb | str:
        """Append *count* ``<tag>`` elements separated by empty ``<Pause/>``.

        Zero (or negative) *count* appends nothing.  Wrapping and return
        value are as for :meth:`append`.
        """
        return self._output(
            lambda root: self._loop_with_pause(root, count, tag, text, attributes or {})
        )

    # -----------------------------------------------------------------------
    # Primary verbs
    # -----------------------------------------------------------------------

    def say(self, *args: object, **options: Any) -> Verb | str:
        """Speak text to the caller.

        Options: ``voice`` (default "man"), ``language`` (default "en"),
        ``loop`` (default 1).  With a truthy ``pause`` the text is repeated
        ``loop`` times as separate elements with a ``<Pause/>`` between
        repetitions.
        """
        text, opts = normalize("say", args, SAY_DEFAULTS, options)
        attributes = {"voice": opts.get("voice"), "language": opts.get("language")}
        if opts.get("pause"):
            count = loop_count("say", opts.get("loop"))
            return self.append_looped(count, "Say", text, attributes)
        attributes["loop"] = opts.get("loop")
        return self.append("Say", text, attributes)

    def play(self, *args: object, **options: Any) -> Verb | str:
        """Play an audio URL to the caller; ``loop`` and ``pause`` as for :meth:`say`."""
        url, opts = normalize("play", args, PLAY_DEFAULTS, options)
        if opts.get("pause"):
            count = loop_count("play", opts.get("loop"))
            return self.append_looped(count, "Play", url)
        return self.append("Play", url, {"loop": opts.get("loop")})

    def gather(self, options: OptionsArg = None, **keywords: Any) -> Verb | str:
        """Collect keypad digits; options become attributes verbatim."""
        return self.append("Gather", None, single_options("gather", options, keywords))

    def record(self, options: OptionsArg = None, **keywords: Any) -> Verb | str:
        """Record the caller; options become attributes verbatim."""
        return self.append("Record", None, single_options("record", options, keywords))

    def dial(self, *args: object, **options: Any) -> Verb | str:
        """Connect the caller to another number.

        A missing number dials the empty string rather than failing.
        """
        number, opts = normalize("dial", args, None, options)
        return self.append("Dial", number if number is not None else "", opts)

    # -----------------------------------------------------------------------
    # Secondary verbs
    # -----------------------------------------------------------------------

    def pause(self, options: OptionsArg = None, **keywords: Any) -> Verb | str:
        return self.append(PAUSE_TAG, None, single_options("pause", options, keywords))

    def redirect(self, *args: object, **options: Any) -> Verb | str:
        url, opts = normalize("redirect", args, None, options)
        return self.append("Redirect", url if url is not None else "", opts)

    def hangup(self) -> Verb | str:
        return self.append("Hangup")
