"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, backend protocol + client
    └── {concept}.py      # Fetch functions (one per endpoint/concept)

Fetch functions take the backend as their first argument so the cache (and
tests) decide which catalog is used::

    from recreation_catalog.datasources.ridb import RidbClient, fetch_facility

    facility = fetch_facility(RidbClient(api_key), "232831")

Currently only ``ridb/`` exists.
"""
