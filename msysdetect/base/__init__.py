# SPDX-License-Identifier: BSD-3-Clause
"""
Command-line scripts for the build system.

This package contains the scripts build tooling runs to query the
host environment.
"""
