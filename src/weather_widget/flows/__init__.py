"""
Prefect flows for batch rendering.

- snapshot.py - Fetch weather for one location and write site/index.html
"""
