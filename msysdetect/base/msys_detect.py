#!/usr/bin/env python3
# SPDX-License-Identifier: BSD-3-Clause
"""
MSYS2 library prefix detector.

Prints the library prefix for the active MSYS2 environment (MSYSTEM)
so build tooling can pick matching prebuilt libraries. Prints nothing
for unknown environments.
"""

import argparse
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from msysdetect.scons.msys import MissingEnvironmentVariable, detect_msys_prefix


def run(environ=None, stdout=None, stderr=None) -> int:
    """Print the prefix for the active environment.

    Returns:
        0 on success (matched or not), 1 if MSYSTEM is not set
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        prefix = detect_msys_prefix(environ)
    except MissingEnvironmentVariable as e:
        print(f"Error: {e}", file=stderr)
        return 1

    if prefix is not None:
        print(prefix, file=stdout)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description='Print the library prefix for the current MSYS2 environment',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  MSYSTEM=MINGW64 %(prog)s      # x64-msvcrt
  MSYSTEM=UCRT64 %(prog)s       # x64-ucrt
  MSYSTEM=CLANG32 %(prog)s      # ucrt
''',
    )
    parser.parse_args()

    sys.exit(run())


if __name__ == '__main__':
    main()
