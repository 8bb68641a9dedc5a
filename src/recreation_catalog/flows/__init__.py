"""
Prefect flows.

- build.py - build-site: load facilities through one cache, render, write site/
"""
