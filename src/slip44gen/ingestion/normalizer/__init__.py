# SPDX-License-Identifier: Apache-2.0
"""Record merging and annotation."""

from .docs import annotate, doc_lines_for
from .merge import disambiguate_names, merge_identities, merge_records

__all__ = [
    "annotate",
    "doc_lines_for",
    "disambiguate_names",
    "merge_identities",
    "merge_records",
]
