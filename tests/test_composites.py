"""
Tests for ryu object and array schemas.
"""

from collections import OrderedDict

import pytest

import ryu
from ryu import Err, Ok, ValidationError


class TestObject:
    def test_simple_object(self):
        schema = ryu.object({"name": ryu.string(), "age": ryu.number()})
        assert schema.parse({"name": "Alice", "age": 30}) == {"name": "Alice", "age": 30}

    @pytest.mark.parametrize("value", [None, "obj", 42, ["a"], True])
    def test_rejects_non_mappings(self, value):
        with pytest.raises(ValidationError, match="Expected object") as exc_info:
            ryu.object({"a": ryu.string()}).parse(value)
        assert exc_info.value.path == ()

    def test_custom_type_message(self):
        with pytest.raises(ValidationError, match="Body must be an object"):
            ryu.object({}, "Body must be an object").parse([])

    def test_accepts_any_mapping(self):
        schema = ryu.object({"a": ryu.number()})
        assert schema.parse(OrderedDict(a=1)) == {"a": 1}

    def test_nested_error_path(self):
        schema = ryu.object({"a": ryu.object({"b": ryu.number()})})
        with pytest.raises(ValidationError) as exc_info:
            schema.parse({"a": {"b": "x"}})
        assert exc_info.value.path == ("a", "b")
        assert exc_info.value.message == "Expected number"

    def test_end_to_end_first_failure(self):
        schema = ryu.object(
            {"name": ryu.string().min(3), "age": ryu.number().positive()}
        )
        with pytest.raises(ValidationError) as exc_info:
            schema.parse({"name": "Ra", "age": 5})
        assert exc_info.value.message == "String must have 3 characters"
        assert exc_info.value.path == ("name",)

    def test_declaration_order_decides_first_failure(self):
        schema = ryu.object({"first": ryu.number(), "second": ryu.number()})
        with pytest.raises(ValidationError) as exc_info:
            schema.parse({"second": "x", "first": "y"})
        assert exc_info.value.path == ("first",)

    def test_missing_required_field(self):
        with pytest.raises(ValidationError) as exc_info:
            ryu.object({"a": ryu.string()}).parse({})
        assert exc_info.value.path == ("a",)
        assert exc_info.value.message == "Expected string"

    def test_missing_optional_field(self):
        schema = ryu.object({"a": ryu.string().optional()})
        assert schema.parse({}) == {"a": None}

    def test_unknown_keys_are_ignored_by_default(self):
        schema = ryu.object({"name": ryu.string()})
        assert schema.parse({"name": "Ryu", "admin": True}) == {"name": "Ryu"}

    def test_strict_rejects_unknown_keys(self):
        schema = ryu.object({"name": ryu.string()}).strict()
        with pytest.raises(ValidationError, match="Unrecognized key: admin") as exc_info:
            schema.parse({"name": "Ryu", "admin": True})
        assert exc_info.value.path == ("admin",)
        assert schema.parse({"name": "Ryu"}) == {"name": "Ryu"}

    def test_strict_checks_declared_fields_first(self):
        schema = ryu.object({"name": ryu.string()}).strict("No extras")
        with pytest.raises(ValidationError, match="Expected string"):
            schema.parse({"name": 1, "extra": 2})
        with pytest.raises(ValidationError, match="No extras"):
            schema.parse({"name": "a", "extra": 2})

    def test_strict_empty_message_is_kept(self):
        result = ryu.object({}).strict("").safe_parse({"extra": 1})
        assert isinstance(result, Err)
        assert result.error.message == ""
        assert result.error.path == ("extra",)

    def test_shape_is_read_only_copy(self):
        shape = {"a": ryu.number()}
        schema = ryu.object(shape)
        shape["b"] = ryu.string()
        assert list(schema.shape) == ["a"]
        with pytest.raises(TypeError):
            schema.shape["c"] = ryu.string()

    def test_invalid_shape(self):
        with pytest.raises(TypeError):
            ryu.object({"a": str})
        with pytest.raises(TypeError):
            ryu.object([ryu.string()])

    def test_deeply_nested_path(self):
        schema = ryu.object(
            {"users": ryu.array(ryu.object({"emails": ryu.array(ryu.email())}))}
        )
        result = schema.safe_parse(
            {"users": [{"emails": ["a@b.io"]}, {"emails": ["ok@x.com", "nope"]}]}
        )
        assert isinstance(result, Err)
        assert result.error.path == ("users", 1, "emails", 1)
        assert result.error.message == "Invalid email"


class TestArray:
    def test_simple_array(self):
        assert ryu.array(ryu.number()).parse([1, 2, 3]) == [1, 2, 3]

    def test_index_path(self):
        with pytest.raises(ValidationError) as exc_info:
            ryu.array(ryu.number()).parse([1, "x", 3])
        assert exc_info.value.path == (1,)

    @pytest.mark.parametrize("value", [None, "abc", {"0": 1}, 5])
    def test_rejects_non_sequences(self, value):
        with pytest.raises(ValidationError, match="Expected array"):
            ryu.array(ryu.number()).parse(value)

    def test_custom_type_message(self):
        with pytest.raises(ValidationError, match="Tags must be a list"):
            ryu.array(ryu.string(), "Tags must be a list").parse("tag")

    def test_tuple_input_returns_list(self):
        assert ryu.array(ryu.string()).parse(("a", "b")) == ["a", "b"]

    def test_result_is_new_list(self):
        data = [1, 2]
        result = ryu.array(ryu.number()).parse(data)
        assert result == data
        assert result is not data

    def test_without_element_schema(self):
        assert ryu.array().parse([1, "a", None]) == [1, "a", None]

    def test_empty_array(self):
        assert ryu.array(ryu.string()).parse([]) == []

    def test_optional_elements(self):
        schema = ryu.array(ryu.number().optional())
        assert schema.parse([1, None, 2]) == [1, None, 2]

    def test_min_max_items(self):
        schema = ryu.array(ryu.number()).min(1).max(2)
        with pytest.raises(ValidationError, match="Array must contain at least 1 items"):
            schema.parse([])
        with pytest.raises(ValidationError, match="Array must contain at most 2 items"):
            schema.parse([1, 2, 3])
        assert schema.parse([1, 2]) == [1, 2]

    def test_item_count_checked_before_items(self):
        schema = ryu.array(ryu.number()).max(1, "Too many")
        with pytest.raises(ValidationError, match="Too many") as exc_info:
            schema.parse(["a", "b"])
        assert exc_info.value.path == ()

    def test_invalid_element(self):
        with pytest.raises(TypeError):
            ryu.array(int)

    def test_array_of_objects(self):
        schema = ryu.array(ryu.object({"id": ryu.number()}))
        assert isinstance(schema.safe_parse([{"id": 1}, {"id": 2}]), Ok)
        result = schema.safe_parse([{"id": 1}, {}])
        assert isinstance(result, Err)
        assert result.error.path == (1, "id")
