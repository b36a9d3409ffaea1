# SPDX-License-Identifier: BSD-3-Clause
"""
MSYS2 library prefix detection for the build system.
"""
