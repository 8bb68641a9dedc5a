"""Recreation Catalog - cached access to RIDB facilities and campsites.

Architecture::

    index.py       Dual-key (identifier + name) in-memory index
    schemas.py     Pydantic records for facilities, campsites and result pages
    datasources/   External APIs (RIDB client, paginated campsite aggregation)
    cache.py       Process-local cache façade (cache-or-fetch, explicit refresh)
    renderers/     Pure data -> HTML (facility page, campsite list)
    flows/         Prefect orchestration (build a static site via one cache)
    services/      Shared utilities (HTTP session with timeout)

Data flow: datasources -> cache (indexes) -> renderers -> site/

The cache never expires entries on its own. Create one ``CatalogCache`` per
process (or flow run) and pass it to whatever issues requests.
"""

__version__ = "0.1.0"

from recreation_catalog.cache import CatalogCache
from recreation_catalog.config import Settings
from recreation_catalog.index import DualIndexStore, LookupType

__all__ = ["CatalogCache", "DualIndexStore", "LookupType", "Settings", "__version__"]
