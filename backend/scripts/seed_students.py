"""Seed demo students with skills and 30 days of score history."""
import os
import random
import sys
from datetime import date, timedelta

from dotenv import load_dotenv

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
load_dotenv(os.path.join(os.path.dirname(__file__), "../../.env"))

from peakplay.database import SessionLocal, engine, Base
from peakplay.models import Student, SkillHistory
from peakplay.schemas import SkillSnapshot
from peakplay.services.student_score_service import StudentScoreService


DEMO_STUDENTS = [
    {"name": "Arjun Mehta", "username": "arjun", "role": "BATSMAN", "age": 15, "weight": 52, "height": 165, "sex": "male"},
    {"name": "Priya Nair", "username": "priya", "role": "BOWLER", "age": 17, "weight": 55, "height": 163, "sex": "female"},
    {"name": "Rohan Das", "username": "rohan", "role": "ALL_ROUNDER", "age": 19, "weight": 70, "height": 178, "sex": "male"},
]

RATED_SKILLS = [
    "batting_grip", "batting_stance", "back_lift", "calling",
    "bowling_grip", "run_up", "release", "follow_through",
    "pick_up", "throw", "high_catch", "flat_catch",
]


def random_snapshot(rng: random.Random) -> SkillSnapshot:
    values = {
        "pushup_score": rng.randint(20, 70),
        "pullup_score": rng.randint(3, 18),
        "vertical_jump": rng.randint(35, 75),
        "sprint_50m": round(rng.uniform(6.8, 9.0), 2),
        "run_5k_time": round(rng.uniform(19, 30), 1),
        "mood_score": rng.randint(4, 10),
        "sleep_score": rng.randint(4, 10),
        "total_calories": rng.randint(1600, 3200),
        "protein": rng.randint(50, 140),
        "water_intake": round(rng.uniform(1.2, 3.5), 1),
    }
    for skill in RATED_SKILLS:
        values[skill] = rng.randint(3, 10)
    return SkillSnapshot(**values)


def seed_students(days: int = 30):
    """Create demo students and record a history point on most days."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    rng = random.Random(42)
    try:
        service = StudentScoreService(db)
        today = date.today()
        
        for data in DEMO_STUDENTS:
            student = db.query(Student).filter(Student.username == data["username"]).first()
            if student:
                print(f"Skipping {data['name']}: already seeded")
                continue
            
            student = Student(**data)
            db.add(student)
            db.commit()
            db.refresh(student)
            print(f"Created student {student.id}: {student.name}")
            
            recorded = 0
            for offset in range(days - 1, -1, -1):
                # Leave gaps so charts show missing days
                if rng.random() < 0.3:
                    continue
                service.upsert_skills(student, random_snapshot(rng))
                service.record_history(
                    student,
                    on_date=today - timedelta(days=offset),
                    is_match_day=rng.random() < 0.1,
                )
                recorded += 1
            
            print(f"  Recorded {recorded} history points")
        
        print(f"Seed complete! {db.query(SkillHistory).count()} history rows in total")
    finally:
        db.close()


if __name__ == "__main__":
    seed_students()
