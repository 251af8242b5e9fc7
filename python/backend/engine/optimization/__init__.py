from backend.engine.optimization.direction import CANDIDATE_ORDER, OptimizationDirection

__all__ = ["CANDIDATE_ORDER", "OptimizationDirection"]
