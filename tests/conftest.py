"""
Pytest configuration and shared fixtures for the lifeboard test suite.
"""
import importlib.util
from pathlib import Path

import matplotlib
import pytest

matplotlib.use('Agg')

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / 'scripts'


@pytest.fixture
def load_script():
    """
    Fixture that imports a module from the scripts/ directory by name.

    Returns:
        Callable taking the script name without extension
    """
    def _load(name):
        spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return _load
