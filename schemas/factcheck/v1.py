from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, Field, StrictInt, StrictStr

from schemas.factcheck.v0 import FactCheckBase, MODULE
from schemas.registry import register
from lucidad.utils.url_utils import validate_url

VERSION = "v1"

SCORE_MIN = 0
SCORE_MAX = 100


def _check_url(value: str) -> str:
    if not validate_url(value):
        raise ValueError("Invalid url")
    # Returned verbatim, never normalized.
    return value


Url = Annotated[StrictStr, AfterValidator(_check_url)]
TruthScore = Annotated[StrictInt, Field(ge=SCORE_MIN, le=SCORE_MAX)]


class SourceLink(BaseModel):
    title: Optional[StrictStr] = None
    url: Url


@register(MODULE, VERSION)
class FactCheckResult(FactCheckBase):
    # Nullable fields must still be present.
    productName: Optional[StrictStr]
    company: Optional[StrictStr]
    keyNumbers: List[StrictStr] = Field(default_factory=list)
    measurableFacts: List[StrictStr] = Field(default_factory=list)
    category: Optional[StrictStr]
    briefContext: Optional[StrictStr]
    truthScore: Optional[TruthScore]
    report: StrictStr
    sources: List[SourceLink] = Field(default_factory=list)

    def display_score(self) -> int:
        """Score for rendering only. Validation never clamps."""
        return max(SCORE_MIN, min(SCORE_MAX, self.truthScore or 0))

    def score_band(self) -> Literal["high", "medium", "low"]:
        score = self.display_score()
        if score >= 80:
            return "high"
        elif score >= 50:
            return "medium"
        return "low"

    @staticmethod
    def json_contract() -> dict:
        """Strict JSON schema the model is asked to fill in."""
        nullable_str = {"type": ["string", "null"]}
        str_list = {"type": "array", "items": {"type": "string"}}
        return {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "productName": nullable_str,
                "company": nullable_str,
                "keyNumbers": str_list,
                "measurableFacts": str_list,
                "category": nullable_str,
                "briefContext": nullable_str,
                "truthScore": {"type": ["integer", "null"], "minimum": SCORE_MIN, "maximum": SCORE_MAX},
                "report": {"type": "string"},
                "sources": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": False,
                        "properties": {
                            "title": nullable_str,
                            "url": {"type": "string"},
                        },
                        "required": ["url"],
                    },
                },
            },
            "required": [
                "productName",
                "company",
                "keyNumbers",
                "measurableFacts",
                "category",
                "briefContext",
                "truthScore",
                "report",
                "sources",
            ],
        }
