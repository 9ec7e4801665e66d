"""
Unit tests for CustomError rendering, chaining and serialization
"""

import json

import pytest

from customerror.errors.builtin import factory, new, new_factory, new_http_error, new_missing_error
from customerror.errors.custom_error import (
    CustomError,
    WrappedError,
    as_custom_error,
    is_error,
    merge,
    wrap,
)
from customerror.errors.options import (
    with_code,
    with_error,
    with_field,
    with_fields,
    with_language,
    with_status_code,
    with_tag,
    with_translation,
)


class TestRendering:
    """error(), api_error() and just_error()"""

    def test_message_is_kept_verbatim(self):
        err = new("Some message")

        assert str(err) == "Some message"
        assert err.error() == "Some message"
        assert err.status_code == 0
        assert isinstance(err, Exception)

    def test_api_error_with_everything(self):
        err = new_missing_error(
            "id",
            with_code("E1010"),
            with_status_code(406),
            with_error(Exception("some error")),
        )

        assert err.api_error() == "E1010: missing id (406 - Not Acceptable). Original Error: some error"
        assert str(err) == "E1010: missing id. Original Error: some error"
        assert err.just_error() == "missing id. Original Error: some error"

    def test_http_error_api_error(self):
        assert new_http_error(404).api_error() == "not found (404 - Not Found)"

    def test_default_message_from_status(self):
        err = new("", with_status_code(202))

        assert str(err) == "Accepted"
        assert err.api_error() == "Accepted (202)"

    def test_default_message_from_status_with_code(self):
        err = new("", with_status_code(202), with_code("E1010"))

        assert str(err) == "E1010: Accepted"
        assert err.api_error() == "E1010: Accepted (202)"

    def test_default_message_from_code(self):
        err = new("", with_code("E1010"))

        assert str(err) == "E1010"
        assert err.api_error() == "E1010"

    def test_tags_and_fields_are_sorted(self):
        err = new_missing_error(
            "id",
            with_code("E1010"),
            with_error(Exception("some error")),
            with_tag("test2", "test1"),
            with_fields({"testKey2": "testValue2", "testKey1": "testValue1"}),
        )

        assert str(err) == (
            "E1010: missing id. Original Error: some error. Tags: test1, test2. "
            "Fields: testKey1=testValue1, testKey2=testValue2"
        )

    def test_nested_causes_render_every_layer(self):
        layer1 = new("layer 1")
        layer2 = new("layer 2", with_error(layer1))
        layer3 = new("layer 3", with_error(layer2))

        err = new("custom message", with_error(layer3))

        assert str(err) == (
            "custom message. Original Error: layer 3. Original Error: layer 2. "
            "Original Error: layer 1"
        )

    def test_set_message(self):
        err = new("first message")
        err.set_message("second message")

        assert str(err) == "second message"

    def test_repr(self):
        err = new("Some message", with_code("E1"), with_status_code(400))

        assert repr(err) == "CustomError(message='Some message', code='E1', status_code=400)"


class TestChain:
    """is_(), unwrap(), is_error() and as_custom_error()"""

    def test_cause_is_exposed(self):
        base = ValueError("boom")
        err = new("Some message", with_error(base))

        assert err.unwrap() is base
        assert err.__cause__ is base
        assert err.is_(base)
        assert not err.is_(ValueError("boom"))

    def test_is_error_walks_the_chain(self):
        base = ValueError("boom")
        inner = new("inner error", with_error(base))
        outer = new("outer error", with_error(inner))

        assert is_error(outer, base)
        assert is_error(outer, inner)
        assert is_error(outer, ValueError)
        assert not is_error(outer, KeyError)
        assert not is_error(None, base)

    def test_is_error_follows_dunder_cause(self):
        base = ValueError("boom")
        try:
            try:
                raise base
            except ValueError as e:
                raise RuntimeError("wrapper") from e
        except RuntimeError as e:
            assert is_error(e, base)

    def test_as_custom_error(self):
        err = new("Some message")
        try:
            raise RuntimeError("wrapper") from err
        except RuntimeError as e:
            assert as_custom_error(e) is err

        assert as_custom_error(ValueError("plain")) is None


class TestWrap:
    def test_wrapped_rendering(self):
        err = new("Some message", with_code("E1010"))
        wrapped = wrap(err, Exception("Some error"), None)

        assert isinstance(wrapped, WrappedError)
        assert str(wrapped) == "E1010: Some message. Wrapped Error(s): Some error"

    def test_wrapped_keeps_identity(self):
        base = ValueError("boom")
        err = new("Some message", with_error(base))
        wrapped = wrap(err, Exception("first"), Exception("second"))

        assert str(wrapped).endswith("Wrapped Error(s): first. second")
        assert wrapped.unwrap() is err
        assert is_error(wrapped, err)
        assert is_error(wrapped, base)
        assert as_custom_error(wrapped) is err

    def test_nothing_to_wrap(self):
        err = new("Some message")

        assert str(wrap(err)) == "Some message"


class TestSerialization:
    """to_dict() / to_json() view"""

    def test_json_view(self):
        err = new(
            "An error occurred",
            with_code("E1010"),
            with_error(Exception("Some error")),
            with_tag("tag1", "tag2"),
            with_field("field1", "value1"),
            with_field("field2", 2),
        )

        assert err.to_json() == (
            '{"code":"E1010","field1":"value1","field2":2,'
            '"message":"An error occurred. Original Error: Some error","tags":["tag1","tag2"]}'
        )

    def test_status_and_translations_are_not_serialized(self):
        err = new("Some message", with_status_code(400), with_translation("es", "algún mensaje"))

        assert err.to_dict() == {"message": "Some message"}

    def test_none_fields_are_skipped(self):
        err = new("Some message", with_field("kept", 0), with_field("dropped", None))

        assert err.to_dict() == {"message": "Some message", "kept": 0}

    def test_field_named_code_overwrites_code(self):
        err = new("Some message", with_code("E1010"), with_field("code", "shadowed"))

        assert err.to_dict()["code"] == "shadowed"

    def test_non_ascii_is_kept(self):
        err = new("id é inválido")

        assert json.loads(err.to_json()) == {"message": "id é inválido"}
        assert "é" in err.to_json()


class TestMerge:
    """merge() and new_child_error()"""

    def test_overlay_wins_and_containers_are_merged(self):
        base = new_factory({"a": 1, "b": 1}, "t1")
        overlay = factory("", with_field("a", 2), with_tag("t2"), with_code("E2"))

        merged = merge(base, overlay)

        assert merged.fields.snapshot() == {"a": 2, "b": 1}
        assert merged.tags == {"t1", "t2"}
        assert merged.code == "E2"

    def test_inputs_are_not_mutated_or_shared(self):
        base = new_factory({"a": 1}, "t1")
        overlay = factory("overlay message", with_field("c", 3))

        merged = merge(base, overlay)
        merged.fields.set("z", 26)
        merged.tags.add("t9")

        assert base.fields.snapshot() == {"a": 1}
        assert base.tags == {"t1"}
        assert base.message == ""
        assert overlay.fields.snapshot() == {"c": 3}

    def test_empty_overlay_values_do_not_erase(self):
        base = factory("base message", with_code("E1"), with_status_code(409))

        merged = merge(base, CustomError())

        assert merged.message == "base message"
        assert merged.code == "E1"
        assert merged.status_code == 409

    def test_child_error(self):
        parent = factory("parent message", with_tag("parent"))

        child = parent.new_child_error(with_tag("child"), with_code("E7"))

        assert child is not parent
        assert child.tags == {"parent", "child"}
        assert child.code == "E7"
        assert parent.code == ""

    def test_child_language_sees_parent_translations(self):
        parent = factory("invalid response", with_translation("es-ES", "respuesta inválida"))

        child = parent.new_child_error(with_language("es-ES"))

        assert child.message == "respuesta inválida"
        assert child.language == "es-ES"
        assert parent.message == "invalid response"
        assert parent.language is None

    def test_child_language_without_translation_keeps_message(self):
        parent = factory("invalid response", with_translation("es-ES", "respuesta inválida"))

        child = parent.new_child_error(with_language("fr"))

        assert child.message == "invalid response"

    def test_child_fields_replace_and_field_adds(self):
        parent = new_factory({"a": 1, "b": 1})

        replaced = parent.new_child_error(with_fields({"c": 3}))
        added = parent.new_child_error(with_field("c", 3))

        assert replaced.fields.snapshot() == {"c": 3}
        assert added.fields.snapshot() == {"a": 1, "b": 1, "c": 3}
        assert parent.fields.snapshot() == {"a": 1, "b": 1}

    def test_copy(self):
        original = factory("original message", with_field("a", 1))
        clone = original.copy()
        clone.fields.set("a", 2)

        assert original.fields.get("a") == 1
        assert clone.message == "original message"


class TestCustomErrorIsRaisable:
    def test_raise_and_catch(self):
        with pytest.raises(CustomError) as exc_info:
            raise new_missing_error("id")

        assert str(exc_info.value) == "missing id"
