# SPDX-License-Identifier: Apache-2.0
"""Registry table parsing: rows, names and records."""

from .names import NameNormalizer, clean_symbol, normalize_name
from .records import BuildResult, build_record, build_records
from .rows import SLIP44_MARKDOWN_HEADER, ExtractionResult, TableRow, extract_rows

__all__ = [
    "SLIP44_MARKDOWN_HEADER",
    "BuildResult",
    "ExtractionResult",
    "NameNormalizer",
    "TableRow",
    "build_record",
    "build_records",
    "clean_symbol",
    "extract_rows",
    "normalize_name",
]
