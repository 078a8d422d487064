# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .demo_service import DemoOrchestrator, clone_deep

__all__ = [
    "DemoOrchestrator",
    "clone_deep",
]
