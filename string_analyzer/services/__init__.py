from string_analyzer.services.analyzer import analyze
from string_analyzer.services.filters import FilterSet, apply
from string_analyzer.services.nl_query import resolve

__all__ = ["FilterSet", "analyze", "apply", "resolve"]
