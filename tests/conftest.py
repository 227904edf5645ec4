import pytest

from pathtracer.core.utils import seed


@pytest.fixture(autouse=True)
def seeded_rng():
    """Makes every test draw the same random sequence on the main thread."""
    seed(1234)
    yield
