# SPDX-License-Identifier: MIT
"""CLI commands for cet-version."""
