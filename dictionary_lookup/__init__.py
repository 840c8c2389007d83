"""
Dictionary Lookup - Merriam-Webster Collegiate Dictionary client

Looks up English words against the Merriam-Webster API and renders
structured definitions in a desktop window or on the console.
"""

__version__ = "1.0.0"
__author__ = "Dictionary Lookup Contributors"
