# SPDX-License-Identifier: BSD-3-Clause
"""
MSYS2 environment configuration for the build system.

This module maps the active MSYS2 environment (the MSYSTEM variable)
to the prefix used to select prebuilt library variants:
- mingw64 uses the 64-bit msvcrt libraries
- mingw32 uses the 32-bit msvcrt libraries
- ucrt64, clang64 and clangarm64 use the 64-bit ucrt libraries
- clang32 uses the 32-bit ucrt libraries
"""

import os

MSYSTEM_VAR = 'MSYSTEM'

# Environment name -> library prefix, checked in order
MSYS_LIB_PREFIXES = (
    ('mingw64', 'x64-msvcrt'),
    ('mingw32', 'msvcrt'),
    ('ucrt64', 'x64-ucrt'),
    ('clang64', 'x64-ucrt'),
    ('clangarm64', 'x64-ucrt'),
    ('clang32', 'ucrt'),
)


class MissingEnvironmentVariable(KeyError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Environment variable {self.name} is not set"


def get_msys_prefix(msystem: str) -> str:
    """Get the library prefix for an MSYS2 environment name, or None."""
    msystem = msystem.lower()
    for name, prefix in MSYS_LIB_PREFIXES:
        if name == msystem:
            return prefix
    return None


def get_supported_msystems() -> list:
    """Get list of known MSYS2 environment names."""
    return [name for name, _ in MSYS_LIB_PREFIXES]


def read_msystem(environ=None) -> str:
    """Read MSYSTEM from environ (os.environ by default).

    An empty value is returned as-is; only a missing variable is an error.
    """
    if environ is None:
        environ = os.environ
    if MSYSTEM_VAR not in environ:
        raise MissingEnvironmentVariable(MSYSTEM_VAR)
    return environ[MSYSTEM_VAR]


def detect_msys_prefix(environ=None) -> str:
    """Get the library prefix for the active MSYS2 environment, or None."""
    return get_msys_prefix(read_msystem(environ))
