# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

"""
Low-level building blocks for the header transcoder: line rules, definition records, section alignment and diagnostics.
Code here should not depend on command line parsing.
"""
