# ---------------------------------------------------------------------------
# Tests configuration
# ---------------------------------------------------------------------------

import pytest
import pandas as pd

from repurpose.core.connection import DuckDBConnection
from repurpose.core.parser import parse_table


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def conn():
    """In-memory DuckDB connection for each test."""
    db = DuckDBConnection()  # :memory:
    yield db
    db.close()


@pytest.fixture
def interactions_csv():
    """Interaction file with mixed header aliases, quoting and a blank line."""
    # C1 -> P1, P2
    # C2 -> P2
    # C3 -> P3
    return (
        '"Compound_ID","Protein_ID",Affinity\n'
        'C1,P1,7.2\n'
        'C1,P2,6.1\n'
        '\n'
        '"C2","P2",5.0\n'
        'C3,P3,8.4\n'
    )


@pytest.fixture
def features_csv():
    """Feature file: C1 is already in the graph, C9 only has descriptors."""
    return (
        "compound_id,mol_weight,logp\n"
        "C1,129.16,-1.43\n"
        "C9,180.16,1.19\n"
    )


@pytest.fixture
def interaction_records(interactions_csv):
    return parse_table(interactions_csv)


@pytest.fixture
def feature_records(features_csv):
    return parse_table(features_csv)


@pytest.fixture
def interactions_df():
    """Pandas version of the interaction table, using drug/target aliases."""
    data = [
        ("D1", "T1"), ("D1", "T2"),
        ("D2", "T2"),
        ("D3", "T3"),
    ]
    return pd.DataFrame(data, columns=["Drug", "Target"])


@pytest.fixture
def interactions_polars():
    """Polars version of the interaction table."""
    import polars as pl
    data = [
        ("D1", "T1"), ("D1", "T2"),
        ("D2", "T2"),
        ("D3", "T3"),
    ]
    return pl.DataFrame(data, schema=["drug", "target"], orient="row")


@pytest.fixture
def repurposer(interactions_csv, features_csv):
    """Repurposer with the interaction and feature files loaded."""
    from repurpose.api import Repurposer
    engine = Repurposer(seed=7)
    engine.load(interactions_csv, features_csv)
    yield engine
    engine.close()
