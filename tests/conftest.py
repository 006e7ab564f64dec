from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_default_factory() -> Iterator[None]:
    """Reset the process-wide default factory around each test."""
    import propbag.factory as factory

    factory.set_default_factory(None)
    yield
    factory.set_default_factory(None)
