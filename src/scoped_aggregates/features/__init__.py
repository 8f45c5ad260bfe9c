"""
Feature descriptors and scoped-name composition.

Descriptors are immutable values built by plain factories; scoped
names are derived from base aggregate names by a single fixed rule.
"""
