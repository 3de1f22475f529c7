# rentwise Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise test suite.

Unit tests mirror the source layout under ``tests/unit``.
"""
