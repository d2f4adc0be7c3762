#!/usr/bin/env python3
"""
Basic example: resolve a few compound names and print their identifiers.

Usage:
    python basic_lookup.py
"""

import logging
from pubchem_client.client import PubChemClient

# Enable logging to see rate limiting in action
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    names = ["aspirin", "caffeine", "not-a-real-compound"]

    with PubChemClient() as client:
        for name in names:
            print(f"Looking up '{name}'...")
            cid = client.get_cid(name)

            if cid == -1:
                print("  not found\n")
                continue

            record = client.get_record(cid)
            print(f"  CID:      {record.cid}")
            print(f"  CAS:      {record.cas}")
            print(f"  SMILES:   {record.smiles}")
            print(f"  InChIKey: {record.inchikey}")
            print(f"  SDF:      {len(record.sdf)} bytes\n")


if __name__ == "__main__":
    main()
