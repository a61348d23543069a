"""
Flow Board - Application Package
Command-line level inspection tool.
"""
