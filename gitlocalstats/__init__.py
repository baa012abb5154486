"""
gitlocalstats: a contribution calendar built from local git repositories.
"""

__version__ = "0.1.0"
