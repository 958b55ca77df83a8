# Creates the schema directly; use Alembic for managed databases.
from taskboard.config import get_settings
from taskboard.db.session import Database


def init():
    settings = get_settings()
    print("Connecting to database...")
    database = Database.from_settings(settings)

    print("Creating tables (if not exist)...")
    database.create_all()
    database.dispose()

    print("Done.")


if __name__ == "__main__":
    init()
