import os
import sys
import uvicorn

from greenxp.config import settings

# Decide the database BEFORE importing greenxp.db, which builds the engine.
# Without any database setting (environment or .env), fall back to a local SQLite file.
if not settings.database_configured:
    base_dir = os.path.dirname(os.path.abspath(__file__))
    db_path = os.path.join(base_dir, "greenxp.db")
    # SQLite URL format: sqlite:///absolute/path/to/file.db (3 slashes for absolute)
    settings.DATABASE_URL = f"sqlite:///{db_path}"
    print(f"[INFO] Using SQLite database at: {db_path}")

from greenxp.db import init_db  # noqa: E402
from greenxp.main import app as fastapi_app  # noqa: E402


if __name__ == "__main__":
    if settings.database_url.startswith("sqlite"):
        init_db()
    try:
        uvicorn.run(fastapi_app, host=settings.HOST, port=settings.PORT, reload=False)
    except KeyboardInterrupt:
        sys.exit(0)
