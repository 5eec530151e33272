from dataclasses import dataclass, field
from typing import Protocol, List, Literal, Optional

from lucidad.utils.url_utils import DataUrl


@dataclass
class Message:
    role: Literal["user", "assistant"]
    content: str
    images: List[DataUrl] = field(default_factory=list)

@dataclass
class PromptMessages:
    system: str
    history: List[Message]
    current: Message

@dataclass
class OutputContract:
    """JSON schema the reply must conform to."""
    name: str
    description: str
    schema: dict

@dataclass
class CallOptions:
    temperature: Optional[float] = None
    max_tokens: int = 1000
    contract: Optional[OutputContract] = None

class LLMProtocol(Protocol):

    def call(self, system: str, messages: list[Message], options: Optional[CallOptions] = None) -> str: ...

    def close(self) -> None: ...
