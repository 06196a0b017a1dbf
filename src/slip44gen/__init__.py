# SPDX-License-Identifier: Apache-2.0
"""slip44gen package initialization."""

import logging

__version__ = "0.1.0"

# Configure validation logger
logging.getLogger("slip44gen.coins.validation").setLevel(logging.WARNING)

__all__ = [
    "cli",
    "codegen",
    "ingestion",
    "__version__",
]
