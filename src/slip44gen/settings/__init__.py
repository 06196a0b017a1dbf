# SPDX-License-Identifier: Apache-2.0
"""Environment settings for slip44gen."""

from .generator import DEFAULT_OUTPUT_PATH, GeneratorSettings

__all__ = ["DEFAULT_OUTPUT_PATH", "GeneratorSettings"]
