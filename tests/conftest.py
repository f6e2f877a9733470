import pytest


@pytest.fixture
def anyio_backend():
    # The application runs on a single asyncio event loop (see SPEC_FULL.md).
    return "asyncio"
