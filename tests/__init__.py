# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
bizeval test suite.

Unit tests per engine component and integration tests for the public API.
"""
