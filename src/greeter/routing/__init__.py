"""Routing — ordered route table with first-match path matching.

Routes are read from the static route table at startup and frozen
when the app compiles.
"""
