# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the debt module.

Covers the amortization scheduler, schedule comparison, principal
projection and the target payoff date solver.
"""
