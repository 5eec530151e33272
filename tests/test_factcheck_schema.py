import pytest
from pydantic import ValidationError

from schemas.factcheck.v0 import MODULE, FactCheckBase
from schemas.factcheck.v1 import FactCheckResult, SourceLink, VERSION
from schemas.registry import load_schema, load_max_schema


class TestRegistry:

    def test_factcheck_registered(self):
        assert load_schema(MODULE, VERSION) is FactCheckResult
        assert load_schema(MODULE, "v0") is FactCheckBase

    def test_newest_version_is_default(self):
        assert load_max_schema(MODULE) is FactCheckResult
        assert load_schema(MODULE) is FactCheckResult

    def test_unknown_version(self):
        with pytest.raises(KeyError):
            load_schema(MODULE, "v99")


class TestSourceLink:

    def test_title_optional(self):
        link = SourceLink(url="https://example.com/a?b=1&c=2")
        assert link.title is None
        # URL is kept verbatim, not normalized
        assert link.url == "https://example.com/a?b=1&c=2"

    def test_url_required(self):
        with pytest.raises(ValidationError):
            SourceLink(title="No link")

    @pytest.mark.parametrize("url", ["not-a-url", "", "example.com"])
    def test_invalid_url(self, url):
        with pytest.raises(ValidationError):
            SourceLink(url=url)


class TestFactCheckResult:

    def test_list_fields_default_empty(self, minimal_result):
        del minimal_result["keyNumbers"]
        del minimal_result["measurableFacts"]
        del minimal_result["sources"]
        result = FactCheckResult.model_validate(minimal_result)
        assert result.keyNumbers == []
        assert result.measurableFacts == []
        assert result.sources == []

    def test_nullable_fields_must_be_present(self, minimal_result):
        del minimal_result["company"]
        with pytest.raises(ValidationError):
            FactCheckResult.model_validate(minimal_result)

    @pytest.mark.parametrize("score", ["72", 72.5, True])
    def test_truth_score_is_strict_integer(self, full_result, score):
        full_result["truthScore"] = score
        with pytest.raises(ValidationError):
            FactCheckResult.model_validate(full_result)

    def test_score_bounds_inclusive(self, full_result):
        for score in (0, 100):
            full_result["truthScore"] = score
            assert FactCheckResult.model_validate(full_result).truthScore == score

    def test_extra_keys_dropped(self, full_result):
        full_result["confidence"] = "high"
        result = FactCheckResult.model_validate(full_result)
        assert "confidence" not in result.model_dump()


class TestDisplayScore:

    @pytest.mark.parametrize("score, expected, band", [
        (None, 0, "low"),
        (0, 0, "low"),
        (49, 49, "low"),
        (50, 50, "medium"),
        (79, 79, "medium"),
        (80, 80, "high"),
        (100, 100, "high"),
    ])
    def test_display_band(self, full_result, score, expected, band):
        full_result["truthScore"] = score
        result = FactCheckResult.model_validate(full_result)
        assert result.display_score() == expected
        assert result.score_band() == band

    def test_display_clamps_without_validation(self, full_result):
        # Clamping only applies when rendering; construct bypasses validation.
        result = FactCheckResult.model_construct(**{**full_result, "truthScore": 120})
        assert result.display_score() == 100
        result = FactCheckResult.model_construct(**{**full_result, "truthScore": -5})
        assert result.display_score() == 0


class TestJsonContract:

    def test_contract_lists_every_field(self):
        contract = FactCheckResult.json_contract()
        assert contract["additionalProperties"] is False
        assert set(contract["required"]) == set(FactCheckResult.model_fields)
        assert set(contract["properties"]) == set(FactCheckResult.model_fields)

    def test_contract_score_bounds(self):
        score = FactCheckResult.json_contract()["properties"]["truthScore"]
        assert score["minimum"] == 0
        assert score["maximum"] == 100
        assert "integer" in score["type"]

    def test_contract_sources(self):
        items = FactCheckResult.json_contract()["properties"]["sources"]["items"]
        assert items["required"] == ["url"]
        assert items["additionalProperties"] is False
