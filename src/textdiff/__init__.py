"""
Text Diff - LCS based text comparison with web and command line front ends.
"""

__version__ = "1.1.0"
