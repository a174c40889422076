"""
oat - command-line password generator.
"""

__version__ = "0.1.0"
