"""Service layer for the leaderboard."""

# pylint: disable=no-member

from typing import Any, Dict, List

from core.constants import LEADERBOARD_SIZE
from core.models import UserProgress
from core.request_cache import request_cache


@request_cache
def get_top_ten_users(user) -> List[Dict[str, Any]]:
    """Returns the highest scoring users, best first; empty for anonymous users."""
    if user is None or not user.is_authenticated:
        return []
    return list(
        UserProgress.objects.order_by("-points", "user_id").values(
            "user_id", "user_name", "user_image_src", "points"
        )[:LEADERBOARD_SIZE]
    )
