"""
SOLID Guide - executable examples of the five SOLID design principles

Each principle has a short example that breaks it and a rewrite that
follows it. The guide renders those examples into a markdown document and
checks that every example still demonstrates its principle.
"""

__version__ = "0.1.0"
__author__ = "SOLID Guide Team"
