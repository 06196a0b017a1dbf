# SPDX-License-Identifier: Apache-2.0
"""Job configuration for slip44gen."""

from .generator import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, GeneratorConfig
from .loader import ConfigVersionError, load_config

__all__ = [
    "GeneratorConfig",
    "CURRENT_CONFIG_VERSION",
    "MIN_SUPPORTED_VERSION",
    "load_config",
    "ConfigVersionError",
]
