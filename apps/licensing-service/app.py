"""
App assembly entry point.

Loads `.env` and exposes `app` with every service router mounted, for local
development (`uvicorn app:app`). Deployed services use
`licensing.api.main:app_from_env` with SERVICE_NAME set, and the gateway uses
`licensing.gateway.main:create_gateway_app`.
"""
from dotenv import load_dotenv

load_dotenv()

from licensing.api.main import create_app  # noqa: E402
from licensing.db.database import init_sqlite_schema  # noqa: E402

init_sqlite_schema()
app = create_app()
