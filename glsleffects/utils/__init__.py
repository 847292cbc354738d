"""
Utility functions for glsleffects.

.. currentmodule:: glsleffects.utils

.. autosummary::
    :toctree: utils/
    :template: ../_templates/custom_layout.rst

    get_shader_dir
    enums

"""

import os
import logging

from . import enums  # noqa: F401

from ._dirs import get_shader_dir, SHADER_EXTENSION  # noqa: F401

logger = logging.getLogger("glsleffects")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("GLSLEFFECTS_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid glsleffects log level: {level}")


_set_log_level()
