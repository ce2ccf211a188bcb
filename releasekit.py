#!/usr/bin/env python3
"""
Convenience shim to run releasekit from a source checkout.
Usage: python releasekit.py [torrent|mediainfo|specs] PATH [--json] [--debug]
"""

from releasekit.cli import main


if __name__ == "__main__":
    main()
