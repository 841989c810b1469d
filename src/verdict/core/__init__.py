"""Core components for verdict.

This package provides the result variants, their constructors, the reason
catalog and the exception hierarchy for out-of-band faults.
"""
