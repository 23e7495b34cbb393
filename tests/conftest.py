from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from rangefold import utils
from rangefold.common.constants import RNG_SEEDS, seed_everywhere


TEST_SEED = RNG_SEEDS.get("tests", 1337)
seed_everywhere(TEST_SEED)

settings.register_profile(
    "ci",
    max_examples=60,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=(
        HealthCheck.filter_too_much,
        HealthCheck.too_slow,
    ),
)
settings.load_profile("ci")


def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture(autouse=True)
def quiet() -> None:
    utils.VERBOSE = False


@pytest.fixture(scope="session")
def pi_digits() -> list[int]:
    return [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]


@pytest.fixture(scope="session")
def words() -> list[str]:
    return [
        "wow",
        "that",
        "is",
        "mississippi",
        "where",
        "alligators",
        "are",
        "glowing",
        "and",
        "glowing",
        "",
        "!",
    ]
