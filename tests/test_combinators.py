"""
Tests for the structural combinators.
"""

import pytest

from fractal import (
    UNDEFINED,
    failure,
    is_failure,
    is_success,
    map_parser,
    optional,
    parse_array_of,
    parse_boolean,
    parse_exactly,
    parse_indexed_object_of,
    parse_number,
    parse_object_of,
    parse_one_of,
    parse_string,
    parse_undefined,
    success,
    voidable,
)


def positive(num):
    return success(num) if num > 0 else failure(num, f"{num} is not positive")


class TestArrayOf:
    def test_succeeds(self):
        assert parse_array_of(parse_number)([1, 2, 3]) == success([1, 2, 3])

    def test_empty(self):
        assert parse_array_of(parse_number)([]) == success([])

    def test_fails_at_index(self):
        value = [1, "2", 3]
        result = parse_array_of(parse_number)(value)
        assert result == failure([1, "2", 3], "Failed at '1': typeof value is string")
        assert result.value is value

    def test_reports_first_failure(self):
        result = parse_array_of(parse_number)([1, "2", None])
        assert result.reason == "Failed at '1': typeof value is string"

    def test_not_an_array(self):
        assert parse_array_of(parse_number)("123") == failure(
            "123", "typeof value is string"
        )
        assert parse_array_of(parse_number)(None) == failure(None, "typeof value is null")

    def test_builds_new_list(self):
        value = (1, 2)
        result = parse_array_of(parse_number)(value)
        assert result == success([1, 2])
        assert result.value is not value

    def test_with_one_of(self):
        parse = parse_array_of(parse_one_of(parse_number, parse_boolean))
        assert parse([1, 2, True, False]) == success([1, 2, True, False])
        assert parse([None, True]) == failure(
            [None, True], "Failed at '0': 'null' did not match any of 2 validators"
        )


class TestObjectOf:
    def test_succeeds(self, album):
        parse = parse_object_of(
            {
                "artist": parse_string,
                "yearReleased": parse_number,
                "name": parse_string,
            }
        )
        assert parse(album) == success(album)

    def test_missing_key_is_undefined(self):
        parse = parse_object_of({"name": parse_string})
        assert parse({"some-key": 1}) == failure(
            {"some-key": 1}, "Failed at 'name': typeof value is undefined"
        )

    def test_allows_undefined_keys(self):
        parse = parse_object_of(
            {
                "name": parse_string,
                "age": parse_one_of(parse_undefined, parse_string),
            }
        )
        assert parse({}) == failure({}, "Failed at 'name': typeof value is undefined")
        assert parse({"name": "Hello", "age": 10}) == failure(
            {"name": "Hello", "age": 10},
            "Failed at 'age': '10' did not match any of 2 validators",
        )
        assert parse({"name": "Hello"}) == success({"name": "Hello", "age": UNDEFINED})

    def test_voidable_field(self):
        parse = parse_object_of({"name": parse_string, "age": voidable(parse_number)})
        result = parse({"name": "Hello"})
        assert is_success(result)
        assert result.value["age"] is UNDEFINED

    def test_optional_field_requires_key(self):
        parse = parse_object_of({"nickname": optional(parse_string)})
        assert parse({"nickname": None}) == success({"nickname": None})
        assert parse({}) == failure({}, "Failed at 'nickname': typeof value is undefined")

    def test_drops_undeclared_keys(self):
        parse = parse_object_of({"name": parse_string})
        value = {"name": "Ripley", "rank": "Warrant Officer"}
        assert parse(value) == success({"name": "Ripley"})

    def test_short_circuits(self):
        calls = []

        def spy(value):
            calls.append(value)
            return failure(value, "spied")

        parse = parse_object_of({"a": parse_number, "b": spy})
        result = parse({"a": "x", "b": "y"})
        assert result == failure({"a": "x", "b": "y"}, "Failed at 'a': typeof value is string")
        assert calls == []

    def test_nests(self, nested_record):
        parse = parse_object_of(
            {
                "name": parse_string,
                "child": parse_object_of({"id": parse_number}),
            }
        )
        invalid = {"name": "Invalid", "child": {"id": "not-number"}}

        assert parse(nested_record) == success(nested_record)
        result = parse(invalid)
        assert result == failure(
            invalid, "Failed at 'child': Failed at 'id': typeof value is string"
        )
        assert result.value is invalid

    def test_three_levels(self):
        parse = parse_object_of(
            {"a": parse_array_of(parse_object_of({"b": parse_boolean}))}
        )
        result = parse({"a": [{"b": True}, {"b": "no"}]})
        assert result.reason == "Failed at 'a': Failed at '1': Failed at 'b': typeof value is string"

    def test_non_mapping_input(self):
        parse = parse_object_of({"name": parse_string})
        assert parse(None) == failure(None, "Failed at 'name': typeof value is undefined")
        assert parse([1]) == failure([1], "Failed at 'name': typeof value is undefined")

    def test_no_fields(self):
        assert parse_object_of({})({"a": 1}) == success({})

    def test_parser_is_hashable_and_fields_are_read_only(self):
        parse = parse_object_of({"name": parse_string})
        assert hash(parse) == hash(parse)
        assert {parse: "person"}[parse] == "person"
        with pytest.raises(TypeError):
            parse.fields["age"] = parse_number

    def test_schema_is_copied(self):
        schema = {"name": parse_string}
        parse = parse_object_of(schema)
        schema["age"] = parse_number
        assert parse({"name": "Ripley"}) == success({"name": "Ripley"})

    def test_rejects_non_mapping_schema(self):
        with pytest.raises(TypeError):
            parse_object_of([parse_string])

    def test_rejects_non_callable_field(self):
        with pytest.raises(TypeError):
            parse_object_of({"name": str.upper, "age": 5})


class TestIndexedObjectOf:
    def test_succeeds(self):
        parse = parse_indexed_object_of(
            parse_one_of(parse_exactly("one"), parse_exactly(1))
        )
        value = {"a": "one", "b": 1}
        assert parse(value) == success(value)

    def test_empty(self):
        assert parse_indexed_object_of(parse_number)({}) == success({})

    def test_fails_at_key(self):
        parse = parse_indexed_object_of(parse_object_of({"name": parse_string}))
        value = {"a": {"name": "Ellen Ripley"}, "b": {"name": 5}}
        assert parse(value) == failure(
            value, "Failed at 'b': Failed at 'name': typeof value is number"
        )

    def test_null_or_undefined(self):
        parse = parse_indexed_object_of(parse_number)
        assert parse(None) == failure(None, "value is null or undefined")
        assert parse(UNDEFINED) == failure(UNDEFINED, "value is null or undefined")

    def test_not_an_object(self):
        parse = parse_indexed_object_of(parse_number)
        assert parse("a") == failure("a", "typeof value is string")
        assert parse([1]) == failure([1], "typeof value is array")


class TestExactly:
    def test_strings(self):
        assert parse_exactly("admin")("admin") == success("admin")
        assert parse_exactly("admin")("user") == failure("user", "is not admin")

    def test_numbers(self):
        assert parse_exactly(1)(1) == success(1)
        assert parse_exactly(1)(1.0) == success(1)
        assert parse_exactly(1)(2) == failure(2, "is not 1")

    def test_booleans(self):
        assert parse_exactly(True)(True) == success(True)
        assert parse_exactly(False)(0) == failure(0, "is not false")

    def test_bool_and_number_do_not_mix(self):
        assert parse_exactly(1)(True) == failure(True, "is not 1")
        assert parse_exactly(True)(1) == failure(1, "is not true")

    def test_rejects_non_scalar(self):
        with pytest.raises(TypeError):
            parse_exactly(["a"])
        with pytest.raises(TypeError):
            parse_exactly(None)


class TestOneOf:
    def test_multiple_validators(self):
        parse = parse_one_of(parse_number, parse_string, parse_boolean)

        assert parse(2015) == success(2015)
        assert parse("2015") == success("2015")
        assert parse(True) == success(True)
        assert parse(None) == failure(None, "'null' did not match any of 3 validators")

    def test_first_success_wins(self):
        parse = parse_one_of(
            map_parser(parse_number, lambda n: success("first")),
            map_parser(parse_number, lambda n: success("second")),
        )
        assert parse(1) == success("first")

    def test_single_parser_is_returned(self):
        assert parse_one_of(parse_number) is parse_number

    def test_mixed_structures(self):
        parse = parse_one_of(
            parse_number,
            parse_boolean,
            parse_string,
            parse_object_of({"name": parse_string}),
        )
        assert parse(1) == success(1)
        assert parse("a") == success("a")
        assert parse({"name": "n", "x": 1}) == success({"name": "n"})
        assert parse([]) == failure([], "'[]' did not match any of 4 validators")


class TestMapParser:
    def test_succeeds(self):
        parse = map_parser(parse_number, positive)
        assert parse(1) == success(1)

    def test_transform_failure(self):
        parse = map_parser(parse_number, positive)
        assert parse(0) == failure(0, "0 is not positive")

    def test_child_failure(self):
        parse = map_parser(parse_number, positive)
        assert parse("1") == failure("1", "typeof value is string")

    def test_child_failure_reports_outer_input(self):
        parse = map_parser(lambda value: failure("inner", "bad"), success)
        outer = {"outer": 1}
        result = parse(outer)
        assert is_failure(result)
        assert result.value is outer
        assert result.reason == "bad"

    def test_transform_failure_reports_outer_input(self):
        parse = map_parser(
            parse_object_of({"when": parse_string}),
            lambda record: failure(record["when"], "not a date"),
        )
        value = {"when": "yesterday", "extra": True}
        result = parse(value)
        assert is_failure(result)
        assert result.value is value
        assert result.reason == "not a date"

    def test_converts_value(self):
        parse = map_parser(parse_string, lambda s: success(len(s)))
        assert parse("abc") == success(3)

    def test_inside_record(self):
        parse = parse_object_of({"count": map_parser(parse_number, positive)})
        assert parse({"count": -1}) == failure(
            {"count": -1}, "Failed at 'count': -1 is not positive"
        )

    def test_rejects_plain_return(self):
        parse = map_parser(parse_number, lambda n: n + 1)
        with pytest.raises(TypeError):
            parse(1)
