"""
Shared utilities for talking to external services.

- http.py - requests session with default timeout and User-Agent
"""
