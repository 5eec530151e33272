import logging
from dataclasses import dataclass
from typing import Any

from schemas.factcheck.v1 import FactCheckResult
from lucidad.adapters.llm.protocol import CallOptions, Message, OutputContract, PromptMessages
from lucidad.services.llm import LLMService
from lucidad.services.validator import result_json_schema, validate_result
from lucidad.utils.exceptions import InvalidImageError
from lucidad.utils.log_utils import setup_logger
from lucidad.utils.url_utils import is_image_data_url, parse_data_url

logger = setup_logger(__name__, logging.DEBUG)

TEMPERATURE = 0.2
MAX_OUTPUT_TOKENS = 900
SYSTEM_PROMPT = """
You are LucidAd, an advertising claim fact-checker. Analyze the advertisement
image and return concise, source-linked JSON per the schema.

Steps:
1) Identify ad name/company
2) Virtually enhance (brightness/contrast/sharpness), denoise, deskew (conceptually) and run OCR
3) Focus on relevant ad area
4) Extract text, isolate factual claims
5) Briefly infer context
6) Rephrase main claim(s) as fact-checkable statements
7) Extract product, company, key numbers, measurable facts
8) Categorize claim type
9) Optionally map to date/region/model
10) Verify claim(s)
11) Assign 0-100 truth probability
12) ~2 sentence summary
13) Provide 2-5 credible source links

Use null for anything you cannot determine. Record your answer by calling
the fact_check_schema tool.
"""
USER_PROMPT = "Fact-check this advertisement."

CONTRACT = OutputContract(
    name="fact_check_schema",
    description="Structured fact-check of an advertisement.",
    schema=result_json_schema(),
)


@dataclass
class AnalyzeBuilder:

    def build_prompt(self, image: Any) -> tuple[PromptMessages, CallOptions]:
        if not is_image_data_url(image):
            raise InvalidImageError()
        try:
            data_url = parse_data_url(image)
        except ValueError as e:
            logger.debug(f"Rejected image payload: {e}")
            raise InvalidImageError() from e

        logger.debug(f"Building prompt for {data_url!r}")
        prompt = PromptMessages(system=SYSTEM_PROMPT,
                                history=[],
                                current=Message("user", USER_PROMPT, images=[data_url]))
        options = CallOptions(temperature=TEMPERATURE,
                              max_tokens=MAX_OUTPUT_TOKENS,
                              contract=CONTRACT)
        return prompt, options


@dataclass
class Analyzer:
    llm: LLMService

    def analyze(self, image: Any) -> FactCheckResult:
        """
        Fact-check one advertisement image.

        Args:
            image: Image data URL, e.g. "data:image/webp;base64,...".

        Raises:
            InvalidImageError: the input is not a base64 image data URL.
            ResponseParseError: the model reply is not JSON.
            ResultValidationError: the JSON does not fit the result schema.
        """
        prompter = AnalyzeBuilder()
        message, options = prompter.build_prompt(image)

        data = self.llm.call_json(message.system, message.history + [message.current], options)
        result = validate_result(data)
        logger.info(f"Analyzed ad: product={result.productName!r} score={result.truthScore}")
        return result
