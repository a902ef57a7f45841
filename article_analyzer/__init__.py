"""
Article Analyzer: lexical bias annotation for article text.
"""

__version__ = "1.0.0"
