"""
Deals Service - Source Package

Lambda function entry points (one directory per deployed function) and the
shared ``deals_service`` package they delegate to.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
