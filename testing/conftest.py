"""
Pytest configuration for AIPIC tests.

Usage:
    pytest testing/
    pytest testing/test_prompt_synthesis.py

No test touches the network: image API calls go through httpx.MockTransport.
"""

import os
from collections.abc import AsyncGenerator, Callable, Generator

import httpx
import pytest

import core.images.service as image_service_module
from core.images import ImageGenConfig, ImageGenerationService
from core.logging import end_run, start_run

TEST_ENDPOINT = "https://images.test/v1/images/generations"


@pytest.fixture(autouse=True)
def logging_run(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Wrap each test in its own logging run.

    When running with pytest-xdist, each worker uses a separate log directory
    to prevent file corruption from concurrent writes.
    """
    worker_id = os.environ.get("PYTEST_XDIST_WORKER")
    if worker_id:
        os.environ["AIPIC_LOG_DIR"] = f"logs/test-{worker_id}"

    test_path = request.node.nodeid.split("::")[0]
    test_name = test_path.replace("/", "-").replace(".py", "")
    start_run(f"test-{test_name}")
    yield
    end_run()


@pytest.fixture(autouse=True)
def no_global_image_service(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts without a configured image service."""
    monkeypatch.setattr(image_service_module, "_service", None)


def image_response(url: str) -> httpx.Response:
    """Successful generation response body."""
    return httpx.Response(200, json={"images": [{"url": url}]})


@pytest.fixture
async def make_image_service() -> AsyncGenerator[Callable[..., ImageGenerationService], None]:
    """Factory for services whose HTTP traffic goes to a mock handler.

    Usage:
        service = make_image_service(handler)
        service = make_image_service(handler, config=ImageGenConfig(api_key="k"))
    """
    created: list[ImageGenerationService] = []

    def _make(handler, config: ImageGenConfig | None = None) -> ImageGenerationService:
        if config is None:
            config = ImageGenConfig(
                api_key="test-key",
                model_id="test-model",
                base_url=TEST_ENDPOINT,
                timeout=5.0,
                batch_size=5,
            )
        service = ImageGenerationService(config)
        service._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        created.append(service)
        return service

    yield _make

    for service in created:
        await service.close()


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow",
    )
