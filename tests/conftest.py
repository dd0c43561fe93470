from __future__ import annotations

from typing import Iterator

import pytest
import structlog

from numplay.core.logging.setup import clear_context


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    # CLI tests reconfigure structlog; give every test a clean default setup
    yield
    structlog.reset_defaults()
    clear_context()
