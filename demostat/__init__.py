"""Regional demographic statistics: CSV loading, metrics and graph layout."""

__version__ = "0.1.0"