"""
repurpose.datasets — Demonstration data.

- **demo**: a small drug-target graph with curated repurposing hypotheses
- **training**: synthetic loss / AUROC curves for the training monitor
"""

from .demo import demo_graph, demo_predictions, demo_interactions_frame
from .training import generate_training_metrics

__all__ = [
    "demo_graph",
    "demo_predictions",
    "demo_interactions_frame",
    "generate_training_metrics",
]
