"""
repurpose.hypotheses.sampler — Candidate link samplers.

The only sampler today is ``RandomCandidateSampler``: it draws random
compound-protein pairs that are not already linked and gives them a random
high score. It is a placeholder for a trained link-prediction model, which
would implement the same ``CandidateSampler`` interface.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Set, Tuple, Union
import numpy as np
from repurpose.types import Graph, Prediction, PredictionStatus

logger = logging.getLogger(__name__)


class CandidateSampler(ABC):
    """Produces scored candidate compound-protein links absent from a graph."""

    @abstractmethod
    def sample(self, graph: Graph) -> List[Prediction]: ...


class RandomCandidateSampler(CandidateSampler):
    def __init__(
        self,
        max_predictions: int = 10,
        max_trials: int = 100,
        min_probability: float = 0.70,
        probability_span: float = 0.29,
        seed: Optional[Union[int, np.random.Generator]] = None,
    ):
        if max_predictions < 0 or max_trials < 0:
            raise ValueError("max_predictions and max_trials must be non-negative")
        self.max_predictions, self.max_trials = max_predictions, max_trials
        self.min_probability, self.probability_span = min_probability, probability_span
        self._rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    def _score(self) -> float:
        return self.min_probability + float(self._rng.random()) * self.probability_span

    def sample(self, graph: Graph) -> List[Prediction]:
        compounds, proteins = graph.compounds, graph.proteins
        if not compounds or not proteins: return []

        existing = graph.edge_keys()
        seen: Set[Tuple[str, str]] = set()
        predictions: List[Prediction] = []
        trials = 0
        while len(predictions) < self.max_predictions and trials < self.max_trials:
            trials += 1
            c = compounds[self._rng.integers(len(compounds))]
            p = proteins[self._rng.integers(len(proteins))]
            if f"{c.id}-{p.id}" in existing or (c.id, p.id) in seen: continue
            seen.add((c.id, p.id))
            predictions.append(Prediction(
                id=f"pred-new-{len(predictions)}",
                compound_id=c.id, compound_name=c.id,
                protein_id=p.id, protein_name=p.id,
                probability=self._score(),
                status=PredictionStatus.NEW,
            ))

        logger.debug("Sampled %d candidates in %d trials", len(predictions), trials)
        return predictions


def rank_predictions(predictions: Iterable[Prediction]) -> List[Prediction]:
    return sorted(predictions, key=lambda p: p.probability, reverse=True)
