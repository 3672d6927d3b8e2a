"""
Infrastructure adapters: HTTP update source and event log backends.
"""
