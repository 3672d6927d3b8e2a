"""
Core building blocks: errors, channels, write-once cell, latest-wins runner.
"""
