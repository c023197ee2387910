"""Tests for core.response_schema module."""

import pytest

from core.errors import MalformedResponse
from core.response_schema import extract_error_message, parse_analysis_result


class TestParseAnalysisResult:
    def test_full_body(self, eczema_body, eczema_result):
        assert parse_analysis_result(eczema_body) == eczema_result

    def test_missing_alternatives_equals_empty(self, eczema_body):
        without = dict(eczema_body)
        del without["alternatives"]
        empty = dict(eczema_body, alternatives=[])
        assert parse_analysis_result(without) == parse_analysis_result(empty)
        assert parse_analysis_result(without).alternatives == ()

    def test_null_alternatives(self, eczema_body):
        result = parse_analysis_result(dict(eczema_body, alternatives=None))
        assert result.alternatives == ()

    def test_alternatives_keep_server_order(self, eczema_body):
        body = dict(eczema_body, alternatives=[
            {"name": "Contact dermatitis", "confidence": 12},
            {"name": "Psoriasis", "confidence": 41},
            {"name": "Rosacea", "confidence": 30},
        ])
        result = parse_analysis_result(body)
        assert [a.name for a in result.alternatives] == ["Contact dermatitis", "Psoriasis", "Rosacea"]

    def test_boundary_confidences(self, eczema_body):
        body = dict(eczema_body, confidence=100, alternatives=[{"name": "Acne", "confidence": 0}])
        result = parse_analysis_result(body)
        assert result.confidence == 100
        assert result.alternatives[0].confidence == 0

    def test_extra_fields_ignored(self, eczema_body):
        result = parse_analysis_result(dict(eczema_body, model="v2", request_id="abc"))
        assert result.condition == "Eczema"

    def test_empty_description_allowed(self, eczema_body):
        assert parse_analysis_result(dict(eczema_body, description="")).description == ""


class TestMalformedBodies:
    @pytest.mark.parametrize("confidence", [101, -1, 82.5, "82", True, None])
    def test_bad_primary_confidence(self, eczema_body, confidence):
        with pytest.raises(MalformedResponse):
            parse_analysis_result(dict(eczema_body, confidence=confidence))

    def test_out_of_range_alternative(self, eczema_body):
        body = dict(eczema_body, alternatives=[{"name": "Psoriasis", "confidence": 140}])
        with pytest.raises(MalformedResponse):
            parse_analysis_result(body)

    def test_alternative_without_name(self, eczema_body):
        body = dict(eczema_body, alternatives=[{"confidence": 20}])
        with pytest.raises(MalformedResponse):
            parse_analysis_result(body)

    def test_alternatives_not_a_list(self, eczema_body):
        with pytest.raises(MalformedResponse):
            parse_analysis_result(dict(eczema_body, alternatives="Psoriasis"))

    @pytest.mark.parametrize("field", ["condition", "confidence", "description"])
    def test_missing_required_field(self, eczema_body, field):
        body = dict(eczema_body)
        del body[field]
        with pytest.raises(MalformedResponse):
            parse_analysis_result(body)

    def test_empty_condition(self, eczema_body):
        with pytest.raises(MalformedResponse):
            parse_analysis_result(dict(eczema_body, condition=""))

    @pytest.mark.parametrize("body", [None, [], "Eczema", 82])
    def test_not_an_object(self, body):
        with pytest.raises(MalformedResponse):
            parse_analysis_result(body)

    def test_user_message_is_generic(self, eczema_body):
        with pytest.raises(MalformedResponse) as exc_info:
            parse_analysis_result(dict(eczema_body, confidence=500))
        assert "unexpected response" in exc_info.value.user_message
        assert "confidence" in exc_info.value.detail


class TestExtractErrorMessage:
    def test_message_preferred(self):
        assert extract_error_message({"message": "bad image", "error": "Bad Request"}) == "bad image"

    def test_error_fallback(self):
        assert extract_error_message({"error": "model unavailable"}) == "model unavailable"

    def test_blank_message_falls_through(self):
        assert extract_error_message({"message": "  ", "error": "model unavailable"}) == "model unavailable"

    def test_non_string_values_skipped(self):
        assert extract_error_message({"message": {"code": 7}, "error": 500}) is None

    @pytest.mark.parametrize("body", [None, [], "oops", {}])
    def test_nothing_usable(self, body):
        assert extract_error_message(body) is None
