"""
Contract test suite for the TMDB v3 REST API.
"""

__version__ = "1.0.0"
