"""Demo content for fresh deployments: blog posts, map locations, quiz questions.

Only runs when ``seed_demo_content`` is enabled, and each table is seeded
only while it is still empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import func, select

from ecotrack.db.models import BlogPost, EcoLocation, QuizAnswer, QuizQuestion

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ecotrack.db.base import Base

logger = structlog.get_logger()

BLOG_POSTS: list[dict[str, str]] = [
    {
        "title": "Climate Change Impact on Bangladesh",
        "content": (
            "Bangladesh is one of the most climate-vulnerable countries in the world. Rising sea levels "
            "threaten coastal communities, while extreme weather events are becoming more frequent. This "
            "article explores the challenges and solutions for building climate resilience in Bangladesh."
        ),
        "image_url": "https://images.pexels.com/photos/1108572/pexels-photo-1108572.jpeg",
        "author": "Dr. Rashid Ahmed",
    },
    {
        "title": "Plastic Pollution in Bangladesh Rivers",
        "content": (
            "Our rivers are facing a severe plastic pollution crisis. From Dhaka to Chittagong, plastic waste "
            "clogs waterways and harms aquatic life. Learn about initiatives to reduce plastic use and promote "
            "sustainable alternatives across Bangladesh."
        ),
        "image_url": "https://images.pexels.com/photos/3856033/pexels-photo-3856033.jpeg",
        "author": "Ayesha Khan",
    },
    {
        "title": "Solar Energy Revolution in Rural Bangladesh",
        "content": (
            "Solar home systems have transformed rural Bangladesh, bringing clean electricity to millions. "
            "This success story showcases how renewable energy can drive sustainable development and improve "
            "lives in off-grid communities."
        ),
        "image_url": "https://images.pexels.com/photos/356036/pexels-photo-356036.jpeg",
        "author": "Md. Karim",
    },
]

ECO_LOCATIONS: list[dict[str, Any]] = [
    {
        "name": "Dhaka Recycling Center",
        "description": "Main recycling facility accepting paper, plastic, and metal waste",
        "latitude": 23.8103,
        "longitude": 90.4125,
        "category": "Recycling Center",
        "city": "Dhaka",
    },
    {
        "name": "Ramna Park",
        "description": "Historic green space in the heart of Dhaka, perfect for eco-walks",
        "latitude": 23.7379,
        "longitude": 90.3958,
        "category": "Park",
        "city": "Dhaka",
    },
    {
        "name": "Chittagong Beach Cleanup Point",
        "description": "Regular beach cleanup initiative meeting point",
        "latitude": 22.3569,
        "longitude": 91.7832,
        "category": "Cleanup Site",
        "city": "Chittagong",
    },
    {
        "name": "Botanical Garden Mirpur",
        "description": "National botanical garden with diverse plant species",
        "latitude": 23.8069,
        "longitude": 90.3635,
        "category": "Park",
        "city": "Dhaka",
    },
    {
        "name": "Sylhet Tea Garden",
        "description": "Organic tea plantation promoting sustainable agriculture",
        "latitude": 24.8949,
        "longitude": 91.8687,
        "category": "Eco Farm",
        "city": "Sylhet",
    },
]

# (question, difficulty, category, points, explanation, answers, index of the correct answer)
QUIZ_QUESTIONS: list[tuple[str, str, str, int, str, list[str], int]] = [
    (
        "What percentage of plastic waste in Bangladesh is recycled?",
        "medium",
        "Waste Management",
        10,
        "Only about 30% of plastic waste is recycled in Bangladesh, highlighting the need for better "
        "waste management systems.",
        ["10%", "30%", "50%", "70%"],
        1,
    ),
    (
        "Which renewable energy source is most suitable for rural Bangladesh?",
        "easy",
        "Energy",
        10,
        "Solar energy is most suitable for rural Bangladesh due to abundant sunlight and decreasing costs "
        "of solar panels.",
        ["Wind Energy", "Solar Energy", "Hydroelectric Power", "Geothermal Energy"],
        1,
    ),
    (
        "How many liters of water does an average person in Dhaka use per day?",
        "hard",
        "Water Conservation",
        15,
        "The average person in Dhaka uses approximately 120-150 liters of water per day, much of which "
        "could be conserved.",
        ["50-70 liters", "80-100 liters", "120-150 liters", "200-250 liters"],
        2,
    ),
    (
        "What is the main cause of air pollution in Dhaka?",
        "easy",
        "Air Quality",
        10,
        "Vehicle emissions and brick kilns are the main causes of air pollution in Dhaka, contributing to "
        "poor air quality.",
        ["Industrial factories", "Vehicle emissions and brick kilns", "Household waste burning", "Power plants"],
        1,
    ),
    (
        "How much carbon dioxide does an average tree absorb per year?",
        "medium",
        "Climate Change",
        10,
        "An average tree absorbs about 21 kg of CO2 per year, making tree planting an effective climate action.",
        ["10 kg per year", "21 kg per year", "50 kg per year", "100 kg per year"],
        1,
    ),
    (
        "What is the primary greenhouse gas responsible for climate change?",
        "easy",
        "Climate Change",
        10,
        "Carbon dioxide (CO2) is the primary greenhouse gas responsible for climate change, mainly from "
        "burning fossil fuels.",
        ["Oxygen", "Carbon Dioxide", "Nitrogen", "Hydrogen"],
        1,
    ),
    (
        "How long does it take for a plastic bottle to decompose in nature?",
        "medium",
        "Waste Management",
        10,
        "A plastic bottle takes approximately 450 years to decompose, making plastic waste a major "
        "environmental concern.",
        ["50 years", "100 years", "450 years", "1000 years"],
        2,
    ),
    (
        "What percentage of Bangladesh's population is at risk from climate change impacts?",
        "hard",
        "Climate Change",
        15,
        "Approximately 70% of Bangladesh's population is at risk from climate change impacts, particularly "
        "from flooding and sea level rise.",
        ["30%", "50%", "70%", "90%"],
        2,
    ),
]


async def _is_empty(db: AsyncSession, model: type[Base]) -> bool:
    count = await db.scalar(select(func.count()).select_from(model))
    return not count


async def seed_demo_content(db: AsyncSession) -> dict[str, int]:
    """Insert demo rows into empty tables. Returns rows added per table."""
    added = {"blog_posts": 0, "eco_locations": 0, "quiz_questions": 0}

    if await _is_empty(db, BlogPost):
        db.add_all([BlogPost(**post) for post in BLOG_POSTS])
        added["blog_posts"] = len(BLOG_POSTS)

    if await _is_empty(db, EcoLocation):
        db.add_all([EcoLocation(**loc) for loc in ECO_LOCATIONS])
        added["eco_locations"] = len(ECO_LOCATIONS)

    if await _is_empty(db, QuizQuestion):
        for text, difficulty, category, points, explanation, answers, correct in QUIZ_QUESTIONS:
            db.add(
                QuizQuestion(
                    question_text=text,
                    difficulty=difficulty,
                    category=category,
                    points=points,
                    explanation=explanation,
                    answers=[
                        QuizAnswer(answer_text=answer, is_correct=i == correct, order_index=i)
                        for i, answer in enumerate(answers)
                    ],
                )
            )
        added["quiz_questions"] = len(QUIZ_QUESTIONS)

    await db.commit()
    logger.info("demo_content_seeded", **added)
    return added
