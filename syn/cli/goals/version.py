import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libsyn.transformer import DEFAULT_MAX_ITERATIONS
from syn.version import SYN_VERSION


def cli_perform_version_goal() -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Syn preprocessor]")
    print(f"\tVersion: {SYN_VERSION}")
    print(f"\tDefault max iterations: {DEFAULT_MAX_ITERATIONS}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)
