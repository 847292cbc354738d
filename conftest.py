"""Global configuration for pytest"""

import logging

import pytest


@pytest.fixture(autouse=True)
def predictable_log_level():
    """
    Called at start of each test, guarantees that the glsleffects logger has its
    default level, also when GLSLEFFECTS_LOG_LEVEL is set in the environment.
    """
    logger = logging.getLogger("glsleffects")
    level = logger.level
    logger.setLevel(logging.WARNING)
    yield
    logger.setLevel(level)


@pytest.fixture
def shader_dir(tmp_path):
    """A function to write shader files below a temporary root directory."""

    def write(files):
        for name, text in files.items():
            filename = tmp_path / name
            filename.parent.mkdir(parents=True, exist_ok=True)
            filename.write_bytes(text.encode())
        return tmp_path

    return write
