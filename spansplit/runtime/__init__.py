from .tracing import trace_timing

__all__ = ["trace_timing"]
