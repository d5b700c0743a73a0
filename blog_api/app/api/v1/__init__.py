"""
Version 1 of the API.

This subpackage bundles the endpoints for the first public version of
the Blog API.
"""
