"""Constants used throughout the application."""

from datetime import timedelta

# Hearts a user holds when full; refills and practice refunds never exceed it
MAX_HEARTS = 5

# Points spent by the shop to refill hearts
POINTS_TO_REFILL = 10

# Points earned for every correctly answered challenge, practice included
POINTS_PER_CHALLENGE = 10

# A subscription stays active this long after its paid period ends
SUBSCRIPTION_GRACE_PERIOD = timedelta(days=1)

# Number of users shown on the leaderboard
LEADERBOARD_SIZE = 10

# Error tags returned (not raised) by the heart economy
HEARTS_ERROR_PRACTICE = "practice"
HEARTS_ERROR_SUBSCRIPTION = "subscription"
HEARTS_ERROR_HEARTS = "hearts"

# Point milestones shown on the quests page
QUESTS = [
    {"title": "Earn 20 XP", "value": 20},
    {"title": "Earn 50 XP", "value": 50},
    {"title": "Earn 100 XP", "value": 100},
    {"title": "Earn 500 XP", "value": 500},
    {"title": "Earn 1000 XP", "value": 1000},
]


def get_quest_progress(points, value):
    """
    Returns how far (0-100) a user with `points` is towards a quest of `value`.

    Args:
        points (int): The user's current points
        value (int): The quest's target points

    Returns:
        float: The percentage, capped at 100
    """
    if value <= 0:
        return 100.0
    return min(points / value * 100, 100.0)
