"""Core models for the Lingo Django application."""

from typing import Optional, TYPE_CHECKING

from django.conf import settings
from django.db import models
from django.utils import timezone

from core.constants import MAX_HEARTS, SUBSCRIPTION_GRACE_PERIOD

# For type checking ForeignKey relations to Django's User model
if TYPE_CHECKING:
    from django.contrib.auth.models import User


class Course(models.Model):
    """A language course, e.g. Spanish."""
    id: int
    title: models.CharField = models.CharField(
        max_length=255,
        help_text="The display name of the course."
    )
    image_src: models.CharField = models.CharField(
        max_length=255,
        help_text="Path of the flag/illustration shown for the course."
    )

    def __str__(self) -> str:
        """Return a string representation of the course."""
        return self.title

    class Meta:
        """Meta options for Course."""
        ordering = ['id']


class Unit(models.Model):
    """A unit within a course, grouping a sequence of lessons."""
    id: int
    course: models.ForeignKey[Course] = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name='units',
        help_text="The course this unit belongs to."
    )
    title: models.CharField = models.CharField(
        max_length=255,
        help_text="The title of the unit."
    )
    description: models.TextField = models.TextField(
        help_text="A short description shown in the unit banner."
    )
    order: models.IntegerField = models.IntegerField(
        help_text="Position of the unit within its course."
    )

    def __str__(self) -> str:
        """Return a string representation of the unit."""
        return f"Unit {self.order}: {self.title} (Course: {self.course_id})"  # type: ignore[attr-defined]

    class Meta:
        """Meta options for Unit."""
        ordering = ['course', 'order']
        indexes = [
            models.Index(fields=['course', 'order'], name='unit_course_order_idx'),
        ]


class Lesson(models.Model):
    """A lesson within a unit, made of challenges."""
    id: int
    unit: models.ForeignKey[Unit] = models.ForeignKey(
        Unit,
        on_delete=models.CASCADE,
        related_name='lessons',
        help_text="The unit this lesson belongs to."
    )
    title: models.CharField = models.CharField(
        max_length=255,
        help_text="The title of the lesson."
    )
    order: models.IntegerField = models.IntegerField(
        help_text="Position of the lesson within its unit."
    )

    def __str__(self) -> str:
        """Return a string representation of the lesson."""
        return f"Lesson {self.order}: {self.title} (Unit: {self.unit_id})"  # type: ignore[attr-defined]

    class Meta:
        """Meta options for Lesson."""
        ordering = ['unit', 'order']
        indexes = [
            models.Index(fields=['unit', 'order'], name='lesson_unit_order_idx'),
        ]


class Challenge(models.Model):
    """A single question inside a lesson."""

    class ChallengeType(models.TextChoices):
        """Kinds of challenge the lesson player knows how to render."""
        SELECT = "SELECT", "Select"
        ASSIST = "ASSIST", "Assist"

    id: int
    lesson: models.ForeignKey[Lesson] = models.ForeignKey(
        Lesson,
        on_delete=models.CASCADE,
        related_name='challenges',
        help_text="The lesson this challenge belongs to."
    )
    type: models.CharField = models.CharField(
        max_length=10,
        choices=ChallengeType.choices,
        help_text="How the challenge is presented."
    )
    question: models.TextField = models.TextField(
        help_text="The question shown to the learner."
    )
    order: models.IntegerField = models.IntegerField(
        help_text="Position of the challenge within its lesson."
    )

    def __str__(self) -> str:
        """Return a string representation of the challenge."""
        return f"Challenge {self.order} ({self.type}): {self.question[:50]}"  # pylint: disable=unsubscriptable-object

    class Meta:
        """Meta options for Challenge."""
        ordering = ['lesson', 'order']
        indexes = [
            models.Index(fields=['lesson', 'order'], name='challenge_lesson_order_idx'),
        ]


class ChallengeOption(models.Model):
    """A possible answer to a challenge."""
    id: int
    challenge: models.ForeignKey[Challenge] = models.ForeignKey(
        Challenge,
        on_delete=models.CASCADE,
        related_name='options',
        help_text="The challenge this option answers."
    )
    text: models.CharField = models.CharField(
        max_length=255,
        help_text="The answer text."
    )
    correct: models.BooleanField = models.BooleanField(
        help_text="Whether choosing this option answers the challenge correctly."
    )
    image_src: models.CharField = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Optional illustration for the option."
    )
    audio_src: models.CharField = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Optional pronunciation audio for the option."
    )

    def __str__(self) -> str:
        """Return a string representation of the option."""
        return f"{self.text} ({'correct' if self.correct else 'wrong'})"

    class Meta:
        """Meta options for ChallengeOption."""
        ordering = ['challenge', 'id']
        verbose_name = "Challenge Option"
        verbose_name_plural = "Challenge Options"


class ChallengeProgress(models.Model):
    """Records that a user has attempted (and possibly completed) a challenge."""
    id: int
    user: models.ForeignKey["User"] = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='challenge_progress',
        help_text="The user whose progress is being tracked."
    )
    challenge: models.ForeignKey[Challenge] = models.ForeignKey(
        Challenge,
        on_delete=models.CASCADE,
        related_name='progress',
        help_text="The challenge the progress relates to."
    )
    completed: models.BooleanField = models.BooleanField(
        default=False,
        help_text="Whether the challenge was answered correctly."
    )

    def __str__(self) -> str:
        """Return a string representation of the challenge progress."""
        status = "completed" if self.completed else "in progress"
        return f"Progress for user {self.user_id} on challenge {self.challenge_id} ({status})"  # type: ignore[attr-defined]

    class Meta:
        """Meta options for ChallengeProgress."""
        indexes = [
            models.Index(fields=['user', 'challenge'], name='progress_user_challenge_idx'),
        ]
        verbose_name = "Challenge Progress"
        verbose_name_plural = "Challenge Progress Records"


class UserProgress(models.Model):
    """Per-user game state: active course, hearts and points."""
    user: models.OneToOneField["User"] = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='user_progress',
        help_text="The user this state belongs to."
    )
    user_name: models.CharField = models.CharField(
        max_length=255,
        default="User",
        help_text="Name shown on the leaderboard."
    )
    user_image_src: models.CharField = models.CharField(
        max_length=255,
        default="/mascot.svg",
        help_text="Avatar shown on the leaderboard."
    )
    # Ensure Optional is used for nullable ForeignKey
    active_course: models.ForeignKey[Optional[Course]] = models.ForeignKey(  # type: ignore[misc]
        Course,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        help_text="The course the user is currently studying."
    )
    hearts: models.IntegerField = models.IntegerField(
        default=MAX_HEARTS,
        help_text="Remaining hearts; a wrong first attempt costs one."
    )
    points: models.IntegerField = models.IntegerField(
        default=0,
        help_text="Experience points earned."
    )

    def __str__(self) -> str:
        """Return a string representation of the user progress."""
        return f"{self.user_name}: {self.hearts} hearts, {self.points} points"

    class Meta:
        """Meta options for UserProgress."""
        indexes = [
            models.Index(fields=['points'], name='userprogress_points_idx'),
        ]
        verbose_name = "User Progress"
        verbose_name_plural = "User Progress Records"


class UserSubscription(models.Model):
    """Billing state mirrored from the payment provider."""
    id: int
    user: models.OneToOneField["User"] = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='subscription',
        help_text="The subscribed user."
    )
    stripe_customer_id: models.CharField = models.CharField(
        max_length=255,
        unique=True,
    )
    stripe_subscription_id: models.CharField = models.CharField(
        max_length=255,
        unique=True,
    )
    stripe_price_id: models.CharField = models.CharField(
        max_length=255,
        blank=True,
        default="",
    )
    stripe_current_period_end: models.DateTimeField = models.DateTimeField(
        help_text="End of the currently paid period."
    )

    @property
    def is_active(self) -> bool:
        """A subscription stays active for one grace day after its period ends."""
        if not self.stripe_price_id or not self.stripe_current_period_end:
            return False
        return self.stripe_current_period_end + SUBSCRIPTION_GRACE_PERIOD > timezone.now()

    def __str__(self) -> str:
        """Return a string representation of the subscription."""
        return f"Subscription {self.stripe_subscription_id} ({'active' if self.is_active else 'inactive'})"

    class Meta:
        """Meta options for UserSubscription."""
        verbose_name = "User Subscription"
        verbose_name_plural = "User Subscriptions"
