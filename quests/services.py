"""Service layer for quests: point milestones derived from the user's points."""

from typing import Any, Dict, List, Optional

from core.constants import QUESTS, get_quest_progress
from core.models import UserProgress


def get_quests(user_progress: Optional[UserProgress]) -> List[Dict[str, Any]]:
    """Returns every quest with the user's `progress` (0-100) and `completed` flag."""
    points = user_progress.points if user_progress else 0
    return [
        {
            **quest,
            "progress": get_quest_progress(points, quest["value"]),
            "completed": points >= quest["value"],
        }
        for quest in QUESTS
    ]
