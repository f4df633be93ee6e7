from .sampler import CandidateSampler, RandomCandidateSampler, rank_predictions

__all__ = ["CandidateSampler", "RandomCandidateSampler", "rank_predictions"]
