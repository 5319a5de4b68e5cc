"""
Kevin Bacon Game.

Builds an actor collaboration graph from movie cast lists and answers
separation queries ("what's your Bacon number?") around a chosen
center of the acting universe.
"""

__version__ = "0.1.0"
