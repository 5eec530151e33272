from typing import Optional

from lucidad.adapters.llm.protocol import CallOptions, LLMProtocol, Message

class FakeLLMAdapter(LLMProtocol):

    def __init__(self):
        self._response = ""
        self._response_func = None
        self._error: Optional[Exception] = None
        self.calls: list[tuple[str, list[Message], Optional[CallOptions]]] = []

    def call(self, system: str, messages: list[Message], options: Optional[CallOptions] = None) -> str:
        self.calls.append((system, messages, options))
        if self._error is not None:
            raise self._error
        if self._response_func is not None:
            return self._response_func(system, messages)
        return self._response

    def close(self):
        pass

    def set_response_static(self, response):
        self._response = response

    def set_response_func(self, func):
        self._response_func = func

    def set_error(self, error: Exception):
        self._error = error
