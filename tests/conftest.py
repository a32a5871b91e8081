from __future__ import annotations

import pytest

from day16.network import Network
from day16.solution import SAMPLE_INPUT


@pytest.fixture(scope="session")
def sample_net() -> Network:
    return Network.from_file(SAMPLE_INPUT)
