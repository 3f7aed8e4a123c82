from string_analyzer.models.strings import AnalyzedString, StringProperties

__all__ = ["AnalyzedString", "StringProperties"]
