from typing import Generator

import pytest

from webber import RequestExecutor, Transport, TransportConfig


@pytest.fixture
def base_url() -> str:
    return "https://test.example.com"


@pytest.fixture
def transport_config() -> TransportConfig:
    return TransportConfig()


@pytest.fixture
def transport(transport_config: TransportConfig) -> Generator[Transport, None, None]:
    with Transport(transport_config) as transport:
        yield transport


@pytest.fixture
def executor(transport: Transport) -> RequestExecutor:
    return RequestExecutor(transport)
