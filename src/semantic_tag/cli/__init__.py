# SPDX-License-Identifier: MIT
"""Command-line interface for sorting and inspecting semantic tags."""
