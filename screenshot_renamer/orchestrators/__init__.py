from .batch_orchestrator import BatchOrchestrator

__all__ = ["BatchOrchestrator"]
