# SPDX-License-Identifier: BSD-3-Clause
"""
SCons helpers for selecting MSYS2 library variants.
"""

import os

from SCons.Environment import Environment

from msysdetect.scons.msys import (
    MSYSTEM_VAR,
    MissingEnvironmentVariable,
    get_msys_prefix,
    get_supported_msystems,
)


def GetMsystem(env: Environment) -> str:
    """Get MSYSTEM from the build's execution environment, then the process."""
    exec_env = env.get('ENV', {})
    if MSYSTEM_VAR in exec_env:
        return exec_env[MSYSTEM_VAR]
    return os.environ.get(MSYSTEM_VAR)


def ConfigureMsysPrefix(env: Environment, required: bool = False) -> str:
    """
    Store the library prefix for the active MSYS2 environment.

    Sets MSYS_LIB_PREFIX on env to the matched prefix, or to an empty
    string when MSYSTEM is unset or unknown.

    Args:
        env: Environment to configure
        required: Raise instead of leaving the prefix empty

    Returns:
        The prefix, or None
    """
    msystem = GetMsystem(env)
    if msystem is None:
        if required:
            raise MissingEnvironmentVariable(MSYSTEM_VAR)
        env['MSYS_LIB_PREFIX'] = ''
        return None

    prefix = get_msys_prefix(msystem)
    if prefix is None and required:
        raise ValueError(f"Unsupported MSYS2 environment: {msystem}. "
                         f"Supported: {get_supported_msystems()}")

    env['MSYS_LIB_PREFIX'] = prefix or ''
    return prefix


def MsysLibName(env: Environment, name: str) -> str:
    """Prepend MSYS_LIB_PREFIX to a library name if one is configured."""
    prefix = env.get('MSYS_LIB_PREFIX', '')
    if prefix:
        return f'{prefix}-{name}'
    return name
