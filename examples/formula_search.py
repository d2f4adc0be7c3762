#!/usr/bin/env python3
"""
Example: search compounds by molecular formula.

PubChem sometimes queues a formula search and hands back a listkey instead
of results; the client polls it once and reports whether the job finished.

Usage:
    python formula_search.py C9H8O4
"""

import sys
import logging
from pubchem_client.client import PubChemClient

logging.basicConfig(level=logging.INFO)


def main():
    formula = sys.argv[1] if len(sys.argv) > 1 else "C9H8O4"

    with PubChemClient() as client:
        result = client.formula_search(formula)

        print(f"Formula {formula}: {len(result.cids)} CIDs ({result.state.value})")
        for cid in result.cids:
            smiles, _ = client.get_properties(int(cid))
            print(f"  {cid}: {smiles}")

        if not result.complete:
            print("PubChem was still running the search, try again later.")


if __name__ == "__main__":
    main()
