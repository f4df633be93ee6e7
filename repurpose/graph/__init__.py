from .builder import build, build_topology, BuildResult
from .aliases import COMPOUND_ALIASES, PROTEIN_ALIASES, FEATURE_ID_ALIASES, resolve

__all__ = ["build", "build_topology", "BuildResult", "COMPOUND_ALIASES", "PROTEIN_ALIASES", "FEATURE_ID_ALIASES", "resolve"]
