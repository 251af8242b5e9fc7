from backend.engine.workbench.workbench import Workbench

__all__ = ["Workbench"]
