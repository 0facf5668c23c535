# SPDX-License-Identifier: MIT
"""Command-line interface for cet-version."""

__version__ = "0.1.0"
