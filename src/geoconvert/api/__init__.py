"""
HTTP API for geoconvert.
"""
