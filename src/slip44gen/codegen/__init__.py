# SPDX-License-Identifier: Apache-2.0
"""Code generation for the coin type table."""

from .emitter import escape_string, render_entries, render_table, write_table

__all__ = ["escape_string", "render_entries", "render_table", "write_table"]
