"""Tests for twiml_builder.arguments."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from twiml_builder.arguments import (
    attr_value,
    classify,
    loop_count,
    normalize,
    single_options,
    to_attributes,
)
from twiml_builder.exceptions import InvalidArgumentError
from twiml_builder.models import SAY_DEFAULTS, Options, Text


class TestClassify:
    def test_string(self) -> None:
        assert classify("say", "hello") == Text("hello")

    def test_int(self) -> None:
        assert classify("dial", 4155551234) == Text("4155551234")

    def test_float(self) -> None:
        assert classify("say", 2.5) == Text("2.5")

    def test_mapping(self) -> None:
        variant = classify("say", OrderedDict(loop=2))
        assert isinstance(variant, Options)
        assert dict(variant.values) == {"loop": 2}

    def test_variants_pass_through(self) -> None:
        text = Text("x")
        opts = Options({"a": 1})
        assert classify("say", text) is text
        assert classify("say", opts) is opts

    @pytest.mark.parametrize("arg", [[1], (1,), {1, 2}, None, True, object()])
    def test_rejected(self, arg: object) -> None:
        with pytest.raises(InvalidArgumentError) as excinfo:
            classify("play", arg)
        assert excinfo.value.verb == "play"
        assert "play expects String or Options argument" in str(excinfo.value)
        assert type(arg).__name__ in str(excinfo.value)


class TestNormalize:
    def test_empty(self) -> None:
        assert normalize("dial", ()) == (None, {})

    def test_defaults_copied(self) -> None:
        _, options = normalize("say", (), SAY_DEFAULTS)
        options["loop"] = 9
        assert SAY_DEFAULTS["loop"] == 1

    def test_last_payload_wins(self) -> None:
        payload, _ = normalize("dial", ("111", "222", "333"))
        assert payload == "333"

    def test_maps_merge_left_to_right(self) -> None:
        _, options = normalize("say", ({"loop": 2, "voice": "woman"}, {"loop": 5}), SAY_DEFAULTS)
        assert options == {"voice": "woman", "language": "en", "loop": 5}

    def test_keywords_last(self) -> None:
        _, options = normalize("say", ({"loop": 2},), None, {"loop": 7})
        assert options == {"loop": 7}

    def test_interleaved_shapes(self) -> None:
        payload, options = normalize("redirect", ({"method": "GET"}, "http://a", {"method": "POST"}))
        assert payload == "http://a"
        assert options == {"method": "POST"}

    def test_defaults_lead_attribute_order(self) -> None:
        _, options = normalize("say", ({"loop": 3, "voice": "woman"},), SAY_DEFAULTS)
        assert list(options) == ["voice", "language", "loop"]

    def test_bad_argument_after_good(self) -> None:
        with pytest.raises(InvalidArgumentError):
            normalize("say", ("ok", ["bad"]))


class TestSingleOptions:
    def test_absent(self) -> None:
        assert single_options("gather") == {}

    def test_mapping(self) -> None:
        assert single_options("gather", {"numDigits": 4}) == {"numDigits": 4}

    def test_options_variant(self) -> None:
        assert single_options("pause", Options({"length": 3})) == {"length": 3}

    def test_keywords_merge(self) -> None:
        assert single_options("record", {"timeout": 5}, {"timeout": 9}) == {"timeout": 9}

    def test_non_mapping(self) -> None:
        with pytest.raises(InvalidArgumentError, match="gather expects Options argument, got str"):
            single_options("gather", "http://foobar.com")


class TestLoopCount:
    @pytest.mark.parametrize(("value", "expected"), [(0, 0), (1, 1), (3, 3), ("4", 4), (-1, 0)])
    def test_coercion(self, value: object, expected: int) -> None:
        assert loop_count("play", value) == expected

    @pytest.mark.parametrize("value", [None, "many", [2]])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="play loop must be an integer"):
            loop_count("play", value)


class TestAttributes:
    def test_bool_spelling(self) -> None:
        assert attr_value(True) == "true"
        assert attr_value(False) == "false"

    def test_numbers(self) -> None:
        assert attr_value(10) == "10"
        assert attr_value(1.5) == "1.5"

    def test_to_attributes(self) -> None:
        attrs = to_attributes({"timeout": 10, "record": False, "callerId": None})
        assert attrs == {"timeout": "10", "record": "false"}
