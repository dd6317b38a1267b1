import os

import pytest

from explicit_pi.zeros import load_zeta_zeros

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
ZEROS_30_PATH = os.path.join(DATA_DIR, "zeta_zeros_30.txt")
ZEROS_1000_PATH = os.path.join(DATA_DIR, "zeta_zeros_1000.txt")


@pytest.fixture(scope="session")
def zeros_30():
    return load_zeta_zeros(ZEROS_30_PATH)


@pytest.fixture(scope="session")
def zeros_1000():
    return load_zeta_zeros(ZEROS_1000_PATH)
