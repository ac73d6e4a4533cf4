#!/usr/bin/env python3

"""
Example script building the combined room list from saved Netatmo payloads.

Reads the homestatus and homesdata response bodies from JSON files, either
given on the command line or through the NETATMO_HOMESTATUS_FILE and
NETATMO_HOMESDATA_FILE environment variables, and prints the rooms.

Usage:
  export NETATMO_HOMESTATUS_FILE="homestatus.json"
  export NETATMO_HOMESDATA_FILE="homesdata.json"
  python3 build_rooms.py [--homestatus FILE] [--homesdata FILE] [--meta]
"""

import argparse
import json
import logging
import os
import sys

from pynetatmoproxy import build_room_data
from pynetatmoproxy.const import HOMESDATA_ENDPOINT, HOMESTATUS_ENDPOINT

# --- Configuration ---
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)

# --- Argument Parsing ---
parser = argparse.ArgumentParser(
    description="Combine Netatmo homestatus and homesdata into one room list."
)
parser.add_argument(
    "--homestatus",
    default=os.getenv("NETATMO_HOMESTATUS_FILE"),
    help=f"Path to a saved {HOMESTATUS_ENDPOINT} response body.",
)
parser.add_argument(
    "--homesdata",
    default=os.getenv("NETATMO_HOMESDATA_FILE"),
    help=f"Path to a saved {HOMESDATA_ENDPOINT} response body.",
)
parser.add_argument(
    "--meta",
    action="store_true",
    help="Include the raw payloads in the output.",
)


def load_payload(path):
    """Load a JSON payload, or return None when no path is given."""
    if not path:
        return None
    with open(path, encoding="utf-8") as payload_file:
        return json.load(payload_file)


def main():
    """Build and print the combined rooms."""
    args = parser.parse_args()
    if not args.homestatus and not args.homesdata:
        logging.error(
            "Please pass --homestatus/--homesdata or set NETATMO_HOMESTATUS_FILE "
            "and NETATMO_HOMESDATA_FILE."
        )
        sys.exit(1)

    try:
        homestatus = load_payload(args.homestatus)
        homesdata = load_payload(args.homesdata)
    except OSError as e:
        logging.error("Could not read payload file: %s", e)
        sys.exit(1)
    except json.JSONDecodeError as e:
        logging.error("Payload file is not valid JSON: %s", e)
        sys.exit(1)

    data = build_room_data(homestatus, homesdata)
    logging.info("Combined %d rooms.", len(data["rooms"]))

    output = data if args.meta else data["rooms"]
    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
