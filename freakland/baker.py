"""Command-line entry point of the offline asset baker."""

from __future__ import annotations

import sys
from typing import Sequence

from . import log

_USAGE = (
    "Usage: asset_baker <command> [options]\n"
    "Commands:\n"
    "  mesh   <input.gltf> <output.fmesh>\n"
    "  tex    <input.png>  <output.ftex>\n"
    "  scene  <input.json> <output.fscene>\n"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the baker; prints usage and returns 1 when no command is given."""
    args = list(sys.argv[1:] if argv is None else argv)

    log.init()
    log.info("Baker", "Asset baker started")

    if not args:
        sys.stderr.write(_USAGE)
        return 1

    log.warn("Baker", f"No baking backend available for '{args[0]}'. Exiting.")
    log.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())