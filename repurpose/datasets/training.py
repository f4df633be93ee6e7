"""
repurpose.datasets.training — Synthetic training curves for the monitor view.
"""
from __future__ import annotations
import numpy as np
import pandas as pd
from typing import Optional


def generate_training_metrics(n_epochs: int = 50, seed: Optional[int] = 42) -> pd.DataFrame:
    """
    Generate a plausible link-prediction training curve.

    Loss decays exponentially from 2.5 with a floor of 0.1; AUROC rises
    from 0.5 towards 0.9 and is capped at 0.91. Both carry small uniform noise.

    Columns: ``epoch``, ``loss``, ``auroc``

    Parameters
    ----------
    n_epochs : int
        Number of epochs (rows).
    seed : int, optional
        Random seed for reproducibility.
    """
    rng = np.random.default_rng(seed)
    i = np.arange(n_epochs)
    loss = np.maximum(0.1, 2.5 * np.exp(-0.1 * i) + rng.random(n_epochs) * 0.05)
    auroc = np.minimum(0.91, 0.5 + 0.4 * (1 - np.exp(-0.08 * i)) + rng.random(n_epochs) * 0.02)
    return pd.DataFrame({"epoch": i + 1, "loss": loss, "auroc": auroc})
