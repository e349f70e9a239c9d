"""
VocabPop - ambient vocabulary notifications from tab-separated text files
"""

__version__ = "1.0.0"
__description__ = "Periodic desktop notifications for vocabulary memorization"
__author__ = "Nullius"

# Export main factory function for easy access
from .core.factory import create_scheduler

__all__ = ["create_scheduler"]
