"""Tolerant pre-scan of raw arguments.

Only the flags that select a resolution path are recognised here; everything
else is left for the full parser built after resolution.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from scaffolder.core.contracts.bootstrap import BaseFlags

_LOG = logging.getLogger(__name__)

PROJECT_VERSION_FLAG = "--project-version"
PLUGINS_FLAG = "--plugins"


def _base_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False, exit_on_error=False)
    parser.add_argument("-h", "--help", action="store_true", default=False)
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    parser.add_argument(PROJECT_VERSION_FLAG, dest="project_version", default=None)
    parser.add_argument(PLUGINS_FLAG, dest="plugins", default="")
    return parser


def prescan_args(argv: Sequence[str]) -> BaseFlags:
    """Extract base flags from ``argv`` without failing on unknown arguments.

    A malformed base flag (e.g. ``--plugins`` with no value) is not an error:
    it only forces generic help, the full parser reports it later.
    """
    try:
        namespace, _ = _base_parser().parse_known_args(list(argv))
    except argparse.ArgumentError as exc:
        _LOG.debug("pre-scan failed, falling back to generic help: %s", exc)
        return BaseFlags(help=True, generic_help=True, verbose=any(a in ("-v", "--verbose") for a in argv))

    return BaseFlags(
        project_version=namespace.project_version,
        plugins_key=(namespace.plugins or "").strip(),
        help=namespace.help,
        verbose=namespace.verbose,
        generic_help=namespace.help and namespace.project_version is None,
    )
