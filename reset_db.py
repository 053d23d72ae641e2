# reset_db.py
from wellness_journal.core.dependency import get_db


def reset_database():
    db = get_db()
    print(f"⚠️ Dropping all journal entries in {db.path}...")
    db.reset()
    print("✅ Journal store emptied.")

if __name__ == "__main__":
    reset_database()
