from .analysis import ResultAnalyzer
from .driver import TestDriver

__all__ = ['ResultAnalyzer', 'TestDriver']
