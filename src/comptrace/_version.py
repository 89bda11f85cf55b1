"""
Version information for comptrace.

This file is the canonical source for version numbers; setup.py reads
PIP_VERSION from it. The __version__ string carries build metadata after
the base version.

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 0.3.0-beta_main_12-20261015-4f2e91ac
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 3
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", ...

__version__ = "0.3.0-beta_main_12-20261015-4f2e91ac"
__app_name__ = "comptrace"

_PEP440_PHASES = {"alpha": "a0", "beta": "b0"}


def _build_fields(version):
    """Split a full version string into (base, branch, build number).

    A bare base version has no branch and build number 0.
    """
    base, _, meta = version.partition("_")
    if not meta:
        return base, None, "0"
    branch, _, build = meta.partition("_")
    return base, branch, build.split("-")[0] or "0"


def get_base_version():
    """Return MAJOR.MINOR.PATCH[-PHASE]."""
    return _build_fields(__version__)[0]


def get_pip_version():
    """
    Return a PEP 440 version for setuptools.

    - main branch: 0.3.0-beta_main_12-... -> 0.3.0b0
    - other branches: 0.3.0-beta_dev_12-... -> 0.3.0b0.dev12
    """
    release = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        release += _PEP440_PHASES.get(PHASE, PHASE)
    _, branch, build = _build_fields(__version__)
    if branch in (None, "main"):
        return release
    return f"{release}.dev{build}"


VERSION = __version__
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
