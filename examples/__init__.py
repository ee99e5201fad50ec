# examples/__init__.py
"""
patternbook examples package.

This package contains demonstration scripts showing how to use the patternbook catalogue.
These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Running demos from Python instead of the command line
- advanced_examples.py: Custom registries, scripted sessions and profiling
"""
