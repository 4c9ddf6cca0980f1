import json
from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from codelab.config import ExecutionConfig, TutorConfig
from codelab.execution import ExecutionProxy
from codelab.tutor import TutorProxy

PISTON_URL = "http://piston.test/api/v2/piston/execute"


class PistonStub:
    """Stand-in for the remote execution service, recording request bodies."""

    def __init__(self, response=None, status_code: int = 200, error: Exception | None = None):
        self.response = {} if response is None else response
        self.status_code = status_code
        self.error = error
        self.requests: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.error is not None:
            raise self.error
        if isinstance(self.response, str):
            return httpx.Response(self.status_code, text=self.response)
        return httpx.Response(self.status_code, json=self.response)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


class FakeChatClient:
    """Minimal async chat client exposing ``chat.completions.create``."""

    def __init__(self, content: str | None = "Hint", error: Exception | None = None, choices=None):
        self.content = content
        self.error = error
        self.choices = choices
        self.calls: list[dict] = []
        self.closed = False
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    async def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def execution_config() -> ExecutionConfig:
    return ExecutionConfig(url=PISTON_URL, source_filename="main")


@pytest.fixture
def tutor_config() -> TutorConfig:
    return TutorConfig(api_key="test-key", response_language="Spanish")


@pytest.fixture
def unconfigured_tutor_config() -> TutorConfig:
    return TutorConfig(api_key=None)


@pytest.fixture
def make_api(execution_config, tutor_config):
    """Build a TestClient whose proxies talk to the given fakes."""
    from codelab.main import app
    from codelab.services import get_execution_proxy, get_tutor_proxy

    def _make(
        piston: PistonStub | None = None,
        chat: FakeChatClient | None = None,
        tutor_cfg: TutorConfig | None = None,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        piston = piston or PistonStub()
        execution_proxy = ExecutionProxy(execution_config, client=piston.client())
        tutor_proxy = TutorProxy(tutor_cfg or tutor_config, client=chat or FakeChatClient())
        app.dependency_overrides[get_execution_proxy] = lambda: execution_proxy
        app.dependency_overrides[get_tutor_proxy] = lambda: tutor_proxy
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make
    app.dependency_overrides.clear()
