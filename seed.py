import logging
from app.core.database import create_db_engine, init_db
from app.schemas.student import StudentCreate
from app.services.student.store import StudentStore

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    StudentCreate(name="Arun Kumar", department="CSE", email="arun@example.com"),
    StudentCreate(name="Sanjith", department="CSE", email="sanjith@example.com"),
    StudentCreate(name="Priya Raman", department="ECE", email="priya@example.com"),
]


def seed_data(store: StudentStore) -> int:
    """
    Seed initial students into the database.

    Does nothing if the table already has data. Returns the number of
    students created.
    """
    # Kiểm tra xem đã có dữ liệu chưa để tránh tạo trùng lặp
    if store.list_all():
        logger.info("Database already contains data. Skipping seed.")
        return 0

    logger.info("Seeding data...")
    for student in SAMPLE_STUDENTS:
        store.create(student)

    logger.info("✅ Data seeded successfully!")
    return len(SAMPLE_STUDENTS)


if __name__ == "__main__":
    engine = create_db_engine()
    init_db(engine)
    seed_data(StudentStore(engine))
