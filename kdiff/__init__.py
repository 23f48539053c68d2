"""Compare Kubernetes pod resource requests or limits against actual usage."""

__version__ = "0.1.0"
__all__ = ["__version__"]