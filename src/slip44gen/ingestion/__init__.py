# SPDX-License-Identifier: Apache-2.0
"""Registry ingestion: sources, parsing, merging and pipeline helpers."""
