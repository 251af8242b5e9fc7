from backend.engine.dispatcher.dispatcher import (
    Comparison,
    SolveRequest,
    compare,
    dispatch,
    run_request,
)

__all__ = ["Comparison", "SolveRequest", "compare", "dispatch", "run_request"]
