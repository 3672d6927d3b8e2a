"""
Application layer: classification, fetching, coordination, telemetry.
"""
