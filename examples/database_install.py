"""Installing into databases.

sqlite and msaccess load into a single database file. mysql and postgres
read their credentials from a conn_file with one ``key value`` pair per
line.
"""

from pathlib import Path

from pydataretriever import Retriever


retriever = Retriever.from_environment()

# sqlite: one file, created if missing
retriever.install("portal", "sqlite", db_file="portal.sqlite")

# postgres: credentials from ./postgres.conn unless conn_file is given
conn_file = Path("postgres.conn")
if not conn_file.exists():
    conn_file.write_text(
        "host localhost\nport 5432\nuser postgres\npassword secret\n"
    )
retriever.install("portal", "postgres", conn_file=conn_file, log_dir="./logs")
