"""
Shared service utilities.

- http.py - requests session factory (timeout injection, opt-in retries)
"""
