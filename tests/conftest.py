import pytest
import vectfit


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts from, and leaves behind, the default configuration."""
    vectfit.config.clear()
    try:
        yield
    finally:
        vectfit.config.clear()
