import numpy as np
import pytest

from imgfilters import tools


@pytest.fixture(autouse=True)
def quiet_timing(monkeypatch):
    monkeypatch.setattr(tools.PrintExecutionTime, 'ENABLED', False)


@pytest.fixture
def small_plane() -> np.ndarray:
    return np.array([
        [10, 20, 30],
        [40, 50, 60],
        [70, 80, 90],
    ], dtype='uint8')


@pytest.fixture
def noise_plane() -> np.ndarray:
    rng = np.random.default_rng(seed=7)
    return rng.integers(0, 256, size=(64, 64), dtype=np.uint8)


@pytest.fixture
def rgba_image() -> np.ndarray:
    rng = np.random.default_rng(seed=11)
    return rng.integers(0, 256, size=(12, 9, 4), dtype=np.uint8)
