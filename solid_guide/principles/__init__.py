"""
Before/after examples for the five SOLID principles.

Each module is independent of the others and uses only the standard
library, so any one of them can be copied into a project on its own.
"""
