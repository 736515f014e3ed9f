"""Unit tests for the MediaType value object.

This module tests construction, equality and hashing, wildcard
compatibility, the parameter builder methods and typed parameter
access.
"""

import itertools

import pytest

from mediatype import (
    MediaType,
    MediaTypeArgumentError,
    ParameterFormatError,
)


def test_constructor_defaults_to_wildcards():
    assert str(MediaType()) == "*/*"
    assert str(MediaType(None, None)) == "*/*"
    assert str(MediaType("foo", "bar")) == "foo/bar"
    assert str(MediaType("foo", "bar", None)) == "foo/bar"
    assert str(MediaType("foo", "bar", {})) == "foo/bar"
    assert str(MediaType("foo", "bar", {"x": "y"})) == "foo/bar;x=y"


@pytest.mark.parametrize("type_, subtype", [(None, "bar"), ("*", "bar")])
def test_constructor_rejects_wildcard_type_with_concrete_subtype(type_, subtype):
    with pytest.raises(MediaTypeArgumentError) as exc_info:
        MediaType(type_, subtype)
    assert exc_info.value.code == "MEDIA_TYPE_ARGUMENT_ERROR"


def test_constructor_copies_parameters():
    params = {"a": "1"}
    mt = MediaType("foo", "bar", params)
    params["a"] = "2"
    params["b"] = "3"
    assert dict(mt.parameters) == {"a": "1"}


def test_parameters_view_is_read_only():
    mt = MediaType.parse("foo/bar;a=1")
    with pytest.raises(TypeError):
        mt.parameters["a"] = "2"
    with pytest.raises(TypeError):
        MediaType("foo", "bar").parameters["a"] = "2"
    assert mt.parameters["A"] == "1"
    assert "A" in mt.parameters


def test_attributes_cannot_be_assigned():
    mt = MediaType("foo", "bar")
    with pytest.raises(AttributeError):
        mt.type = "baz"
    with pytest.raises(AttributeError):
        mt.other = 1


def test_wildcard_flags():
    assert MediaType(None, None).is_wildcard_type
    assert MediaType("*", None).is_wildcard_type
    assert MediaType(None, "*").is_wildcard_type
    assert MediaType("*", "*").is_wildcard_type
    assert not MediaType("foo", "*").is_wildcard_type

    assert MediaType(None, None).is_wildcard_subtype
    assert MediaType("*", None).is_wildcard_subtype
    assert MediaType("foo", "*").is_wildcard_subtype
    assert not MediaType("foo", "bar").is_wildcard_subtype


def test_equality():
    parse = MediaType.parse
    assert parse("*/*") == parse("*/*")
    assert parse("foo/bar") == parse("Foo/Bar")
    assert parse("foo/bar;x=y") == parse("foo/bar; X=y")
    assert parse("foo/bar;x=y") == parse("foo/bar; X=a;x=y")
    assert parse("foo/bar;a=1;b=2") == parse("foo/bar;b=2;a=1")

    assert parse("foo/baz") != parse("foo/bar")
    assert parse("foo/baz") != parse("Foo/Bar")
    assert parse("foo/bar;x=a") != parse("foo/bar; X=y")
    assert parse("foo/bar;x=z") != parse("foo/bar; X=a;x=y")
    assert parse("foo/bar;x=y") != parse("foo/bar; x=Y")
    assert parse("foo/bar") != "foo/bar"


def test_hash_is_consistent_with_equality():
    a = MediaType.parse("Foo/Bar; Charset=utf-8; b=2")
    b = MediaType.parse("foo/bar;b=2;charset=utf-8")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, MediaType.parse("foo/bar")}) == 2


COMPAT_SAMPLES = [
    "*/*",
    "image/*",
    "image/png",
    "IMAGE/PNG",
    "image/jpeg",
    "text/*",
    "text/plain;charset=utf-8",
]


def test_compatibility():
    parse = MediaType.parse
    assert parse("image/*").is_compatible(parse("image/png"))
    assert parse("*/*").is_compatible(parse("text/plain"))
    assert parse("image/png").is_compatible(parse("IMAGE/PNG;q=1"))
    assert not parse("image/png").is_compatible(parse("image/jpeg"))
    assert not parse("image/*").is_compatible(parse("text/plain"))
    assert not parse("image/png").is_compatible(None)


@pytest.mark.parametrize("a, b", list(itertools.product(COMPAT_SAMPLES, repeat=2)))
def test_compatibility_is_symmetric(a, b):
    ma, mb = MediaType.parse(a), MediaType.parse(b)
    assert ma.is_compatible(mb) == mb.is_compatible(ma)


def test_without_parameters():
    with_params = MediaType.parse("foo/bar;x=y")
    assert str(with_params.without_parameters()) == "foo/bar"
    assert dict(with_params.parameters) == {"x": "y"}

    plain = MediaType.parse("foo/bar")
    assert plain.without_parameters() is plain


def test_without_named_parameters():
    mt = MediaType.parse("foo/bar;a=b;x=y;Z=1")
    assert str(mt.without_named_parameters("x")) == "foo/bar;a=b;Z=1"
    assert str(mt.without_named_parameters("X", "z")) == "foo/bar;a=b"
    assert str(mt.without_named_parameters("missing")) == "foo/bar;a=b;x=y;Z=1"
    assert str(mt) == "foo/bar;a=b;x=y;Z=1"
    assert str(MediaType.parse("foo/bar").without_named_parameters("x")) == "foo/bar"


def test_without_named_parameters_requires_a_name():
    with pytest.raises(MediaTypeArgumentError):
        MediaType.parse("foo/bar;a=b").without_named_parameters()


def test_with_parameter():
    assert str(MediaType.parse("foo/bar").with_parameter("a", "b")) == "foo/bar;a=b"
    assert (
        str(MediaType.parse("foo/bar;x=y").with_parameter("a", "b"))
        == "foo/bar;x=y;a=b"
    )


def test_with_parameter_overwrites_in_place():
    mt = MediaType.parse("foo/bar;y=a;x=b")
    assert str(mt.with_parameter("y", "z")) == "foo/bar;y=z;x=b"
    assert str(mt.with_parameter("Y", "z")) == "foo/bar;y=z;x=b"
    assert str(mt) == "foo/bar;y=a;x=b"


def test_with_parameters():
    plain = MediaType.parse("foo/bar")
    assert plain.with_parameters({}) is plain
    assert plain.with_parameters(None) is plain

    additional = {"a": "b", "c": "d"}
    assert str(plain.with_parameters(additional)) == "foo/bar;a=b;c=d"
    assert (
        str(MediaType.parse("foo/bar;x=y").with_parameters(additional))
        == "foo/bar;x=y;a=b;c=d"
    )


def test_with_parameter_quotes_special_values():
    mt = MediaType.parse("multipart/form-data").with_parameter("boundary", "a;b")
    assert str(mt) == 'multipart/form-data;boundary="a;b"'
    assert MediaType.parse(str(mt)) == mt


def test_get_parameter(text_plain_utf8):
    assert text_plain_utf8.get_parameter("CHARSET") == "utf-8"
    assert text_plain_utf8.get_parameter("missing") is None
    assert MediaType.parse("x/y;a=;b=c").get_parameter("a") is None


def test_get_int_parameter():
    mt = MediaType.parse("x/y;level=2;neg=-7;bad=2a;plus=+3")
    assert mt.get_int_parameter("level") == 2
    assert mt.get_int_parameter("neg") == -7
    assert mt.get_int_parameter("plus") == 3
    assert mt.get_int_parameter("missing") is None
    with pytest.raises(ParameterFormatError) as exc_info:
        mt.get_int_parameter("bad")
    assert exc_info.value.details == {
        "parameter": "bad",
        "value": "2a",
        "expected": "integer",
    }


def test_get_bool_parameter():
    mt = MediaType.parse("x/y;a=true;b=FALSE;c=yes")
    assert mt.get_bool_parameter("a") is True
    assert mt.get_bool_parameter("b") is False
    assert mt.get_bool_parameter("missing") is None
    assert mt.get_bool_parameter("missing", default=True) is True
    with pytest.raises(ParameterFormatError):
        mt.get_bool_parameter("c")
