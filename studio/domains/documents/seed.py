"""Демонстрационный проект, с которым стартует студия."""

import logging

from studio.domains.documents.store import DocumentStore

logger = logging.getLogger(__name__)


CHAPTER_ONE = (
    "The world had changed overnight, though nobody seemed to notice. Sarah walked through "
    "the empty streets, her footsteps echoing against the silent buildings. The morning sun "
    "cast long shadows across the pavement, but something felt different—wrong, even.\n\n"
    "She paused at the corner of Fifth and Main, the same intersection she'd crossed every day "
    "for the past three years on her way to work. The traffic light cycled through its colors, "
    "but there were no cars to obey its commands. No pedestrians hurried past with coffee cups "
    "and worried expressions. Just silence.\n\n"
    "Sarah pulled out her phone, the screen lighting up with a dozen missed calls from her "
    "sister. Her thumb hovered over the callback button, but something made her hesitate. In "
    "the distance, she could hear what sounded like... singing? A low, melodic hum that seemed "
    "to come from everywhere and nowhere at once.\n\n"
    "That's when she noticed the birds. Or rather, the complete absence of them. No pigeons "
    "pecking at crumbs, no sparrows chirping from the telephone wires. Even the ever-present "
    "seagulls that usually fought over scraps near the harbor were gone.\n\n"
    "The singing grew louder."
)

CHARACTER_PROFILES = """# Main Characters

## Sarah Chen
- Age: 28
- Occupation: Data Analyst
- Background: Grew up in suburban Portland, moved to the city for work
- Personality: Observant, analytical, tends to overthink situations
- Key traits: Always notices details others miss, has a habit of humming when nervous

## Marcus Rivera
- Age: 34
- Occupation: Emergency Room Doctor
- Background: First-generation immigrant, worked his way through medical school
- Personality: Calm under pressure, natural leader, protective of others
- Key traits: Keeps a small notebook for jotting down observations, speaks three languages

## Elena Vasquez
- Age: 19
- Occupation: College student (Art major)
- Background: Local to the city, lives with her grandmother
- Personality: Creative, intuitive, sees patterns in chaos
- Key traits: Always carries a sketchbook, has synesthesia (sees sounds as colors)"""

WORLD_BUILDING = """# Setting: New Harbor City

## Geography
- Coastal city, population ~500,000
- Built around a natural harbor
- Mix of historic downtown and modern suburbs
- Key locations: Harbor District, University Quarter, Old Town, Industrial Zone

## The Phenomenon
- Started at dawn on a Tuesday in March
- Affects all living creatures except humans
- No electronic interference, but subtle changes in behavior patterns
- Seems to emanate from the harbor area

## Timeline
- Day 1: Animals disappear, strange singing begins
- Day 2: Plants begin to change color
- Day 3: The singing becomes more complex
- Day 7: First human behavioral changes observed"""

STORY_OUTLINE = """# Three-Act Structure

## Act I: Setup (Chapters 1-3)
- Introduce Sarah and the empty world
- Discovery of other survivors
- Establishment of the mystery

## Act II: Confrontation (Chapters 4-8)
- Investigation into the phenomenon
- Character development and relationships
- Rising tension and obstacles
- Discovery of the source

## Act III: Resolution (Chapters 9-12)
- Final confrontation
- Character arcs complete
- Resolution of the mystery
- New world order established"""


def _document(node_id, name, word_count, content, created, updated):
    return {
        "id": node_id,
        "name": name,
        "kind": "document",
        "title": name,
        "content": content,
        "notes": "",
        "word_count": word_count,
        "created_at": created,
        "updated_at": updated,
    }


SAMPLE_PROJECT = [
    {
        "id": "draft",
        "name": "Draft",
        "kind": "folder",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
        "children": [
            _document("chapter-1", "Chapter 1: The Beginning", 1250, CHAPTER_ONE,
                      "2024-01-02T00:00:00+00:00", "2024-01-15T00:00:00+00:00"),
            _document("chapter-2", "Chapter 2: Discovery", 980, "",
                      "2024-01-03T00:00:00+00:00", "2024-01-03T00:00:00+00:00"),
            _document("chapter-3", "Chapter 3: Revelation", 0, "",
                      "2024-01-04T00:00:00+00:00", "2024-01-04T00:00:00+00:00"),
        ],
    },
    {
        "id": "research",
        "name": "Research",
        "kind": "folder",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
        "children": [
            _document("characters", "Character Profiles", 450, CHARACTER_PROFILES,
                      "2024-01-05T00:00:00+00:00", "2024-01-10T00:00:00+00:00"),
            _document("worldbuilding", "World Building Notes", 320, WORLD_BUILDING,
                      "2024-01-06T00:00:00+00:00", "2024-01-12T00:00:00+00:00"),
        ],
    },
    _document("outline", "Story Outline", 180, STORY_OUTLINE,
              "2024-01-07T00:00:00+00:00", "2024-01-08T00:00:00+00:00"),
]


def seed_store(store: DocumentStore) -> DocumentStore:
    """Загрузка демонстрационного проекта в хранилище"""
    store.load(SAMPLE_PROJECT)
    logger.info(f"Seeded sample project ({len(store)} nodes)")
    return store
