from .core import GameSession, compute_score, run_case

__all__ = ["GameSession", "compute_score", "run_case"]
