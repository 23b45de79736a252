"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions go through the shared session and return raw dicts or
``schemas`` models::

    from weather_lookup.services.http import session

    def fetch_something(lat, lon) -> dict[str, Any]:
        resp = session.get(API_URL, params={...})
        resp.raise_for_status()
        return resp.json()

Turning raw payloads into display values is the job of ``presentation/``.
"""
