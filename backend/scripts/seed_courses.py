"""
Seed sample courses for development.
Run: python -m scripts.seed_courses  (from backend/)
"""

import asyncio

from app.core.config import settings
from app.db.mongo import create_client
from app.repositories.courses import create_course


SEED_COURSES = [
    {
        "course_title": "Intro to Web Development",
        "category": "Web Development",
        "deadline": "2026-12-01",
        "description": "HTML, CSS and a first JavaScript project.",
        "poster": {"email": "poster@achieveit.dev", "name": "Demo Poster"},
    },
    {
        "course_title": "Digital Marketing Basics",
        "category": "Digital Marketing",
        "deadline": "2026-11-15",
        "description": "Campaign planning and analytics.",
        "poster": {"email": "poster@achieveit.dev", "name": "Demo Poster"},
    },
    {
        "course_title": "Graphics Design Fundamentals",
        "category": "Graphics Design",
        "deadline": "2027-01-10",
        "description": "Layout, colour and typography.",
        "poster": {"email": "designer@achieveit.dev", "name": "Demo Designer"},
    },
]


async def seed():
    """Insert seed courses."""
    client = create_client(settings)
    try:
        db = client[settings.MONGO_DB]
        for data in SEED_COURSES:
            course_id = await create_course(db, dict(data))
            print(f"  Created course: {data['course_title']} ({course_id})")
    finally:
        client.close()
    print(f"Seeded {len(SEED_COURSES)} courses.")


if __name__ == "__main__":
    asyncio.run(seed())
