"""Routing — segment scoring, URI matching, and path resolution.

All functions here are pure: ranking is recomputed on every matching
pass and nothing is cached between calls.
"""
