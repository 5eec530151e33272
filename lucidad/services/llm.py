import logging
import json
from dataclasses import dataclass
from typing import Any, Optional

from lucidad.utils.exceptions import ResponseParseError
from lucidad.utils.log_utils import setup_logger
from lucidad.adapters.llm.protocol import CallOptions, Message, LLMProtocol

logger = setup_logger(__name__, logging.DEBUG)

CONTEXT_WINDOW = 200000
TOKEN_LIMIT = 50000

@dataclass
class LLMService:
    adapter: LLMProtocol

    def call_unsafe(self, system: str, messages: list[Message], options: Optional[CallOptions] = None) -> str:
        """Call LLM."""
        self.validate_input(system, messages)
        return self.adapter.call(system, messages, options)

    def call_json(self, system: str, messages: list[Message], options: Optional[CallOptions] = None) -> Any:
        """Call LLM and parse the reply as one JSON document."""
        resp = self.call_unsafe(system, messages, options)
        result = self.extract_json_from_response(resp)
        if not result['success']:
            logger.warning(f"Failed to parse json from chat. Error: {result['error']}")
            raise ResponseParseError()
        return result['data']

    @staticmethod
    def extract_json_from_response(response: str) -> dict:
        """
        Parse the reply as JSON, with additional context about the failure.

        Args:
            response: The chatbot response string

        Returns:
            Dictionary containing:
            - 'success': boolean indicating if JSON was successfully extracted
            - 'data': the parsed JSON object (if successful)
            - 'raw_match': the raw string that was matched (if any)
            - 'error': error message (if unsuccessful)
        """
        result = {
            'success': False,
            'data': None,
            'raw_match': None,
            'error': ""
        }

        if not response or not isinstance(response, str):
            result['error'] = 'Invalid input: response must be a non-empty string'
            return result

        # The reply must be exactly one JSON document; no prose, no code fences.
        result['raw_match'] = response
        try:
            result['data'] = json.loads(response)
            result['success'] = True
        except json.JSONDecodeError as e:
            result['error'] = f'JSON decode error:\n{e}'
        return result

    @staticmethod
    def validate_input(system: str, messages: list[Message]) -> None:
        # Only text counts toward the limit; image blocks are sized by the API.
        prompt_length = len(system) + sum([len(m.content) for m in messages])
        if prompt_length >= CONTEXT_WINDOW:
            logger.error(f"Prompt length {prompt_length} exceeds context window {CONTEXT_WINDOW}")
        if prompt_length >= TOKEN_LIMIT:
            logger.error(f"Prompt length {prompt_length} exceeds rate limit of {TOKEN_LIMIT} / minute.")
            raise ValueError(
                f"Prompt length {prompt_length} exceeds rate limit of {TOKEN_LIMIT} / minute.")
