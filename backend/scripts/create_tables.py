# backend/scripts/create_tables.py
from sqlalchemy import inspect
from greenxp.db import engine, init_db

# registers users, missions and user_missions on Base.metadata, then creates them
init_db()

# Show what was actually created
insp = inspect(engine)
print("tables:", insp.get_table_names(schema=None))
