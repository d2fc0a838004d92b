import logging
import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/netlinker) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from netlinker import Router, ServerConfig  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("NETLINKER_BASE_URL", raising=False)
    monkeypatch.delenv("NETLINKER_API_VERSION", raising=False)
    monkeypatch.delenv("NETLINKER_ENVIRONMENT", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def version() -> str:
    return "v1"


@pytest.fixture
def server(base_url: str, version: str) -> ServerConfig:
    return ServerConfig(base_url=base_url, version=version)


@pytest.fixture
def router() -> Router:
    return Router()


@pytest.fixture(autouse=True)
def reset_netlinker_logger() -> Generator[None, None, None]:
    """Drop handlers added by setup_logging so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("netlinker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
