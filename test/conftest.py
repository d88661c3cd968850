import os
import tempfile

# SQLite en fichero temporal: el listado consulta desde hilos del executor y
# cada hilo abre su propia conexión. Debe fijarse antes de importar la sesión.
_db_dir = tempfile.mkdtemp(prefix="tasks-api-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'tasks.db')}"
os.environ.setdefault("ORM", "memory")
