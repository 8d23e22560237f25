"""Prompt Optimizer CLI"""

__version__ = "0.1.0"
