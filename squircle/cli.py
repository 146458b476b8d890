#!/usr/bin/env python3
# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle - squircle outline and border paths

This is the command line entry point. It builds the squircle outline (the
mask of a decorated rectangle) or its border path and either prints the SVG
path data or renders the decoration with Cairo.

Usage:
    squircle 200 120 -r 16
    squircle 200 120 -r 16 --corners top --border-width 2 --border-only
    squircle 200 120 -r 16 --border-width 3 --border-color #c8a030 -d png -o card.png

Author: Scott Bowman
License: AGPL-3.0-or-later
"""

import logging
import sys
from typing import List, Optional

from .cli_args import build_argument_parser
from .cli_runner import run


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the Squircle command line tool.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
