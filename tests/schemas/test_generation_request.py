"""
GenerationRequest parsing tests
Form text -> typed request, with defaults and ceilings
"""
import pytest

from dummygen.schemas.generate import (
    FieldType,
    GenerationRequest,
    OutputFormat,
    estimate_output_values,
    parse_generation_request,
)


class TestDefaults:
    """Missing and blank values"""

    def test_empty_form(self, test_settings):
        req = parse_generation_request({}, test_settings)

        assert req.output_format == OutputFormat.JSON
        assert req.fields == 5
        assert req.sub_modules == 0
        assert req.array_size == 1
        assert req.field_type == FieldType.STRING

    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_values_use_defaults(self, blank, test_settings):
        form = {"fields": blank, "subModules": blank, "arraySize": blank, "fieldType": blank}

        req = parse_generation_request(form, test_settings)

        assert (req.fields, req.sub_modules, req.array_size) == (5, 0, 1)
        assert req.field_type == FieldType.STRING

    @pytest.mark.parametrize("raw", ["abc", "1.5", "5x", "NaN"])
    def test_non_numeric_uses_default(self, raw, test_settings):
        req = parse_generation_request({"fields": raw, "arraySize": raw}, test_settings)

        assert req.fields == 5
        assert req.array_size == 1

    def test_non_numeric_is_logged(self, test_settings, capture_logs):
        parse_generation_request({"subModules": "abc"}, test_settings)

        assert "generation_request_defaulted" in capture_logs.get_messages()


class TestNumbers:
    """Numeric coercion"""

    def test_numeric_text(self, test_settings):
        form = {"fields": "7", "subModules": "2", "arraySize": "3"}

        req = parse_generation_request(form, test_settings)

        assert (req.fields, req.sub_modules, req.array_size) == (7, 2, 3)

    def test_surrounding_whitespace(self, test_settings):
        req = parse_generation_request({"fields": " 4 "}, test_settings)

        assert req.fields == 4

    def test_explicit_zero_is_kept(self, test_settings):
        """"0" is a value, not a missing field"""
        form = {"fields": "0", "arraySize": "0"}

        req = parse_generation_request(form, test_settings)

        assert req.fields == 0
        assert req.array_size == 0

    def test_negative_clamps_to_zero(self, test_settings):
        req = parse_generation_request({"fields": "-3", "subModules": "-1"}, test_settings)

        assert req.fields == 0
        assert req.sub_modules == 0

    def test_ceilings(self, test_settings, capture_logs):
        test_settings.MAX_OUTPUT_VALUES = 10 ** 30
        form = {
            "fields": str(test_settings.MAX_FIELDS + 1),
            "subModules": "99",
            "arraySize": "100000",
        }

        req = parse_generation_request(form, test_settings)

        assert req.fields == test_settings.MAX_FIELDS
        assert req.sub_modules == test_settings.MAX_SUB_MODULES
        assert req.array_size == test_settings.MAX_ARRAY_SIZE
        assert capture_logs.get_messages().count("generation_request_clamped") == 3

    def test_custom_ceiling(self, test_settings):
        test_settings.MAX_SUB_MODULES = 2

        req = parse_generation_request({"subModules": "5"}, test_settings)

        assert req.sub_modules == 2


class TestOutputBudget:
    """MAX_OUTPUT_VALUES across fields, nesting and replication"""

    @pytest.mark.parametrize(
        "shape, expected",
        [
            ((3, 0, 1), 4),
            ((3, 0, 0), 4),
            ((3, 0, 5), 20),
            ((2, 1, 1), 6),
            ((1, 2, 2), 2 * (2 + 2 * (2 * (2 + 4)))),
        ],
    )
    def test_estimate(self, shape, expected):
        assert estimate_output_values(*shape) == expected

    def test_estimate_matches_replication_at_every_level(self):
        """arraySize multiplies again at each nesting level"""
        assert estimate_output_values(1, 3, 20) > 20 ** 4

    def test_ceiling_values_fit_budget(self, test_settings, capture_logs):
        """Each value at its own ceiling still yields a bounded output"""
        form = {
            "fields": str(test_settings.MAX_FIELDS),
            "subModules": str(test_settings.MAX_SUB_MODULES),
            "arraySize": str(test_settings.MAX_ARRAY_SIZE),
        }

        req = parse_generation_request(form, test_settings)

        assert estimate_output_values(
            req.fields, req.sub_modules, req.array_size
        ) <= test_settings.MAX_OUTPUT_VALUES
        assert (req.fields, req.sub_modules, req.array_size) == (1000, 4, 1)
        assert "generation_request_clamped" in capture_logs.get_messages()

    def test_array_size_shrinks_first(self, test_settings):
        """Deep replicated requests lose copies before nesting"""
        form = {"fields": "1", "subModules": "3", "arraySize": "20"}

        req = parse_generation_request(form, test_settings)

        assert (req.fields, req.sub_modules, req.array_size) == (1, 3, 9)

    def test_fields_shrink_last(self, test_settings):
        test_settings.MAX_OUTPUT_VALUES = 10

        req = parse_generation_request({"fields": "50", "subModules": "2"}, test_settings)

        assert (req.sub_modules, req.array_size) == (0, 1)
        assert req.fields == 9

    def test_within_budget_untouched(self, test_settings, capture_logs):
        form = {"fields": "5", "subModules": "2", "arraySize": "3"}

        req = parse_generation_request(form, test_settings)

        assert (req.fields, req.sub_modules, req.array_size) == (5, 2, 3)
        assert "generation_request_clamped" not in capture_logs.get_messages()


class TestEnums:
    """format and fieldType"""

    @pytest.mark.parametrize("raw", ["xml", " xml "])
    def test_xml_format(self, raw, test_settings):
        req = parse_generation_request({"format": raw}, test_settings)

        assert req.output_format == OutputFormat.XML

    @pytest.mark.parametrize("raw", ["json", "yaml", "XML", "Xml", "", None])
    def test_anything_else_is_json(self, raw, test_settings):
        req = parse_generation_request({"format": raw}, test_settings)

        assert req.output_format == OutputFormat.JSON

    @pytest.mark.parametrize("raw", ["string", "number", "boolean", "uuid", "email"])
    def test_known_field_types(self, raw, test_settings):
        req = parse_generation_request({"fieldType": raw}, test_settings)

        assert req.field_type.value == raw

    def test_unknown_field_type(self, test_settings):
        req = parse_generation_request({"fieldType": "date"}, test_settings)

        assert req.field_type == FieldType.STRING

    @pytest.mark.parametrize("raw", ["NUMBER", "Uuid", "EMAIL"])
    def test_field_type_is_case_sensitive(self, raw, test_settings):
        """Only lower-case type names are recognized"""
        req = parse_generation_request({"fieldType": raw}, test_settings)

        assert req.field_type == FieldType.STRING


class TestModel:
    """GenerationRequest model"""

    def test_aliases(self):
        req = GenerationRequest.model_validate(
            {"format": "xml", "fields": 2, "subModules": 1, "arraySize": 3, "fieldType": "uuid"}
        )

        assert req.output_format == OutputFormat.XML
        assert (req.fields, req.sub_modules, req.array_size) == (2, 1, 3)
        assert req.field_type == FieldType.UUID

    def test_rejects_negative(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            GenerationRequest(fields=-1)
