from .matcher import FuzzyMatcherProtocol

__all__ = ["FuzzyMatcherProtocol"]
