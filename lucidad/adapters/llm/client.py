from typing import Optional

import anthropic
import json
import logging
import os
from dataclasses import dataclass, field
from anthropic.types import MessageParam
from lucidad.utils.log_utils import setup_logger
from lucidad.adapters.llm.protocol import CallOptions, Message, LLMProtocol

logger = setup_logger(__name__, logging.DEBUG)
_client: Optional[anthropic.Anthropic] = None

DEFAULT_MODEL = "claude-sonnet-4-5"


def _model_from_env() -> str:
    return os.environ.get("ANTHROPIC_VISION_MODEL") or DEFAULT_MODEL


@dataclass
class ClaudeAdapter(LLMProtocol):
    model: str = field(default_factory=_model_from_env)

    @staticmethod
    def _get_client() -> anthropic.Anthropic:
        # Note: we don't need to close the client. In practice it's better to keep one single
        # client open during the lifetime of the applicaiton. Not per function invocation.
        global _client
        if _client is None or _client.is_closed():
            key = os.environ.get('ANTHROPIC_API_KEY')
            if not key:
                raise ValueError("Missing environment variable ANTHROPIC_API_KEY")
            _client = anthropic.Anthropic(api_key=key)
        return _client


    def close(self) -> None:
        global _client
        if _client is not None:
            _client.close()
            _client = None


    def call(self, system: str, messages: list[Message], options: Optional[CallOptions] = None) -> str:
        if not system or not system.strip():
            raise ValueError("Claude API requires non-empty system text.")
        options = options or CallOptions()

        client = self._get_client()
        response = client.messages.create(
            model=self.model,
            max_tokens=options.max_tokens,
            system=[{
                "type": "text",
                "text": system,
                "cache_control": {"type": "ephemeral"},
            }],
            messages=[self.to_message_param(m) for m in messages],
            **self.request_options(options)
        )
        if response.stop_reason == 'max_tokens':
            logger.warning(f"LLM output truncated at {options.max_tokens} tokens")
        if not response.content:
            raise ValueError("Empty LLM response")

        # A forced tool call carries the structured output as its input.
        for block in response.content:
            if block.type == "tool_use":
                return json.dumps(block.input)
        if len(response.content) > 1:
            logger.warning("Multiple LLM outputs")
        return "".join(block.text for block in response.content if block.type == "text")


    @staticmethod
    def request_options(options: CallOptions) -> dict:
        kwargs = {}
        if options.temperature is not None:
            kwargs["temperature"] = options.temperature
        if options.contract is not None:
            kwargs["tools"] = [{
                "name": options.contract.name,
                "description": options.contract.description,
                "input_schema": options.contract.schema,
            }]
            kwargs["tool_choice"] = {"type": "tool", "name": options.contract.name}
        return kwargs


    @staticmethod
    def to_message_param(message: Message) -> MessageParam:
        if not message.images:
            return MessageParam(content=message.content, role=message.role)
        # Images go before the text that refers to them.
        content = [{
            "type": "image",
            "source": {
                "type": "base64",
                "media_type": image.media_type,
                "data": image.data,
            },
        } for image in message.images]
        content.append({"type": "text", "text": message.content})
        return MessageParam(content=content, role=message.role)
