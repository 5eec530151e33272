import importlib

import pytest
from lucidad.adapters.llm.client import ClaudeAdapter


@pytest.mark.parametrize("target_env", [None, "DEV"])
def test_function_app_uses_claude(monkeypatch, target_env):
    if target_env is None:
        monkeypatch.delenv("TARGET_ENV", raising=False)
    else:
        monkeypatch.setenv("TARGET_ENV", target_env)
    function_app = importlib.reload(importlib.import_module("function_app"))
    assert isinstance(function_app.container.llm.adapter, ClaudeAdapter)
    assert function_app.container.analyzer.llm is function_app.container.llm
