"""
winadmin — console utility for basic Windows host administration.
"""

__version__ = "0.1.0"
