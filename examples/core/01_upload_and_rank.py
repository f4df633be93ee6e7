"""
Example 01: Uploading Interaction Data and Ranking Repurposing Hypotheses

Demonstrates the end-to-end ingestion run: an interaction table (with any of
the accepted header aliases) plus an optional feature table become a
compound-protein graph and a ranked list of candidate links.
"""

import logging
from repurpose import Repurposer, IngestionError

INTERACTIONS = """drug,target
Metformin,AMPK
Aspirin,COX-1
Atorvastatin,HMG-CoA
Losartan,AGTR1
Metformin,MTOR
"""

FEATURES = """compound_id,mol_weight
Metformin,129.16
Rapamycin,914.17
"""

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with Repurposer(seed=42) as engine:
        # 1. Rejected upload: no protein column
        # ---------------------------------------
        try:
            engine.load("drug,weight\nAspirin,180\n")
        except IngestionError as e:
            print(f"Upload rejected: {e}")

        # 2. Valid upload
        # ---------------
        engine.load(INTERACTIONS, FEATURES)
        print("\nModel stats:", engine.summary())

        # 3. Hypotheses
        # -------------
        print("\nTop hypotheses:")
        print(engine.top_predictions(n=5).to_pandas())

        print("\nRapamycin has descriptors only, so it appears as an isolated node:")
        print(engine.neighbors("Rapamycin").num_rows, "edges")

        print("\nCSV export:")
        print(engine.export_csv())

if __name__ == "__main__":
    main()
