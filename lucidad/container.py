from dataclasses import dataclass
import os

from lucidad.adapters.llm.client import ClaudeAdapter
from lucidad.adapters.llm.fake_client import FakeLLMAdapter
from lucidad.services.llm import LLMService
from lucidad.transforms.analyzer import Analyzer

@dataclass
class ServiceContainer:
    """Dependency injection container"""

    # Adapters (infrastructure)
    llm: LLMService

    # Transforms (business logic)
    analyzer: Analyzer


    @classmethod
    def create(cls):
        target_env = os.environ.get("TARGET_ENV", "PROD")
        if target_env == "DEV" or target_env == "TEST":
            return cls.create_fake()
        else:
            return cls.create_real()


    @classmethod
    def create_real(cls) -> 'ServiceContainer':
        """Create container with production dependencies"""
        return cls.create_container(LLMService(ClaudeAdapter()))


    @classmethod
    def create_fake(cls) -> 'ServiceContainer':
        """Create container with test doubles"""
        return cls.create_container(LLMService(FakeLLMAdapter()))


    @classmethod
    def create_container(cls, llm_client: LLMService):
        return cls(
            llm=llm_client,
            analyzer=Analyzer(llm_client),
        )
