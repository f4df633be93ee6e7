"""
repurpose.export — CSV export of hypothesis lists.

The export uses display headers (``Compound ID``, ...). Re-importing it with
``parse_table`` yields lower-cased display keys such as ``compound id``,
which are *not* the ingestion aliases; ``read_predictions_csv`` maps them back.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple, Union
from repurpose.types import Prediction, PredictionStatus
from repurpose.core.parser import parse_table

EXPORT_HEADERS = ("Compound ID", "Compound Name", "Protein ID", "Protein Name", "Probability", "Status")
DEFAULT_EXPORT_NAME = "target_repurposing_hypotheses.csv"


def _row(p: Prediction) -> List[str]:
    return [p.compound_id, p.compound_name, p.protein_id, p.protein_name, f"{p.probability:.4f}", PredictionStatus(p.status).value]


def predictions_to_csv(predictions: Iterable[Prediction]) -> str:
    lines = [",".join(EXPORT_HEADERS)] + [",".join(_row(p)) for p in predictions]
    return "\n".join(lines)


def write_predictions_csv(predictions: Iterable[Prediction], path: Union[str, Path] = DEFAULT_EXPORT_NAME) -> Path:
    path = Path(path)
    path.write_text(predictions_to_csv(predictions), encoding="utf-8")
    return path


def read_predictions_csv(text: str) -> List[Tuple[str, str, float, str]]:
    """Recover ``(compound_id, protein_id, probability, status)`` tuples from an export."""
    return [
        (r["compound id"], r["protein id"], float(r["probability"]), r["status"])
        for r in parse_table(text)
    ]
