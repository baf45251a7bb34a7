"""Domain layer for APSIM output loading.

This layer contains the parsing, merging and typing rules for output files.
It works on lines and DataFrames and has no knowledge of the filesystem.
"""
