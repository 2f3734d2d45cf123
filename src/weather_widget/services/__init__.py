"""
Shared service utilities.

- http.py - ``requests.Session`` factory with a default timeout
"""
