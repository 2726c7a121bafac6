# -----------------------------------------------------------------------------
# Copyright (C) 2024 Iliyas Jorio.
# This file is part of CommitLanes, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import json
import logging
import sys
from argparse import ArgumentParser

from commitlanes import settings
from commitlanes.graph import LaneBuildLoop, LaneDiagram
from commitlanes.toolbox import excStrings

logger = logging.getLogger(__name__)


def makeParser() -> ArgumentParser:
    parser = ArgumentParser(prog="commitlanes", description="Lay out the lanes of a commit graph")
    parser.add_argument("definition", nargs="+",
                        help="History definition, children first (e.g.: \"m:a,b a-c b-c c\")")
    parser.add_argument("-m", "--max-lanes", type=int, default=None,
                        help="Lane budget (default: maxLanes from prefs)")
    parser.add_argument("--json", action="store_true", help="Dump rows as JSON instead of drawing a diagram")
    parser.add_argument("--debug", action="store_true", help="Enable expensive assertions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show row numbers and debug logging")
    return parser


def rowsToJson(rows) -> list:
    return [[[edge.child, edge.parent, edge.state.name.lower(), lane] for edge, lane in row.items()]
            for row in rows]


def main(argv=None) -> int:
    args = makeParser().parse_args(argv)

    prefs = settings.prefs
    prefs.load()
    prefs.validate()

    logging.basicConfig(
        stream=sys.stdout,
        format='%(levelname).1s %(asctime)s %(filename)-16s | %(message)s',
        datefmt="%H:%M:%S")
    logging.root.setLevel(logging.DEBUG if args.verbose else prefs.verbosity.value)

    if args.debug:
        settings.DEVDEBUG = True

    maxLanes = prefs.maxLanes if args.max_lanes is None else args.max_lanes

    try:
        sequence = LaneDiagram.parseDefinition(" ".join(args.definition))
        builder = LaneBuildLoop(maxLanes).sendAll(sequence)
    except ValueError as exc:
        summary, details = excStrings(exc)
        logger.debug(details)
        print(summary, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(rowsToJson(builder.rows)))
    else:
        print(LaneDiagram.diagram(builder.rows, sequence, verbose=args.verbose, padding=prefs.diagramPadding))
    return 0


if __name__ == "__main__":
    sys.exit(main())
