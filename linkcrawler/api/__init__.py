"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from linkcrawler.api import app

    uvicorn linkcrawler.api:app --port 3000
"""

from linkcrawler.api.app import app

__all__ = ["app"]
