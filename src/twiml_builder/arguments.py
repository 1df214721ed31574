"""Argument classification and normalization for verb methods.

Verbs such as ``say`` and ``dial`` take a variadic argument list in which
each argument is classified by shape rather than position:

  shape                     variant     effect
  ──────────────────────    ────────    ─────────────────────────────
  str, int, float           Text        replaces the payload (last wins)
  Mapping                   Options     shallow-merged over earlier keys
  Text / Options instance   as given    as above
  anything else             --          InvalidArgumentError

``bool`` is not accepted as a payload even though it subclasses ``int``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidArgumentError
from .models import Options, Text, VerbArg


def _shape_error(verb: str, arg: object) -> InvalidArgumentError:
    return InvalidArgumentError(
        verb, f"{verb} expects String or Options argument, got {type(arg).__name__}"
    )


def classify(verb: str, arg: object) -> VerbArg:
    """Return the :data:`~twiml_builder.models.VerbArg` variant for *arg*."""
    if isinstance(arg, (Text, Options)):
        return arg
    if isinstance(arg, bool):
        raise _shape_error(verb, arg)
    if isinstance(arg, (str, int, float)):
        return Text(str(arg))
    if isinstance(arg, Mapping):
        return Options(arg)
    raise _shape_error(verb, arg)


def normalize(
    verb: str,
    args: tuple[object, ...],
    defaults: Mapping[str, Any] | None = None,
    keywords: Mapping[str, Any] | None = None,
) -> tuple[str | None, dict[str, Any]]:
    """Fold *args* into a ``(payload, options)`` pair.

    Parameters
    ----------
    verb:
        Verb name, used in error messages.
    args:
        Positional arguments as received by the verb method.
    defaults:
        Options the verb starts from; later arguments override them.
    keywords:
        Keyword options, merged after every positional mapping.

    Returns
    -------
    tuple
        The last ``Text`` payload seen (``None`` if there was none) and the
        merged options dict, in insertion order.
    """
    payload: str | None = None
    options: dict[str, Any] = dict(defaults or {})

    for arg in args:
        variant = classify(verb, arg)
        if isinstance(variant, Text):
            payload = variant.value
        else:
            options.update(variant.values)

    if keywords:
        options.update(keywords)
    return payload, options


def single_options(
    verb: str,
    options: object = None,
    keywords: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Options for verbs that take at most one positional mapping."""
    if options is None:
        merged: dict[str, Any] = {}
    elif isinstance(options, Options):
        merged = dict(options.values)
    elif isinstance(options, Mapping):
        merged = dict(options)
    else:
        raise InvalidArgumentError(
            verb, f"{verb} expects Options argument, got {type(options).__name__}"
        )
    if keywords:
        merged.update(keywords)
    return merged


def loop_count(verb: str, value: object) -> int:
    """Coerce a ``loop`` option to a repetition count (negative means zero)."""
    try:
        count = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(verb, f"{verb} loop must be an integer, got {value!r}") from exc
    return max(count, 0)


def attr_value(value: object) -> str:
    """Render an option value the way the markup spells it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_attributes(options: Mapping[str, Any]) -> dict[str, str]:
    """Stringify keys and values, dropping options whose value is ``None``."""
    return {str(k): attr_value(v) for k, v in options.items() if v is not None}
