"""
Command-line tools that work on exported stats files.
"""
