"""Admin configurations for the core application models."""

# mypy: disable-error-code="attr-defined"

from django.contrib import admin
from .models import (
    Challenge, ChallengeOption, ChallengeProgress, Course, Lesson, Unit,
    UserProgress, UserSubscription
)


class UnitInline(admin.TabularInline):
    """Units edited on their course's page."""
    model = Unit
    extra = 0
    ordering = ('order',)


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    """Admin configuration for the Course model."""
    list_display = ('title', 'image_src', 'id')
    search_fields = ('title',)
    inlines = [UnitInline]


@admin.register(Unit)
class UnitAdmin(admin.ModelAdmin):
    """Admin configuration for the Unit model."""
    list_display = ('title', 'order', 'course')
    list_filter = ('course',)
    search_fields = ('title', 'course__title')
    list_select_related = ('course',)


@admin.register(Lesson)
class LessonAdmin(admin.ModelAdmin):
    """Admin configuration for the Lesson model."""
    list_display = ('title', 'order', 'unit')
    list_filter = ('unit__course', 'unit')
    search_fields = ('title', 'unit__title', 'unit__course__title')
    list_select_related = ('unit', 'unit__course')


class ChallengeOptionInline(admin.TabularInline):
    """Options edited on their challenge's page."""
    model = ChallengeOption
    extra = 0


@admin.register(Challenge)
class ChallengeAdmin(admin.ModelAdmin):
    """Admin configuration for the Challenge model."""
    list_display = ('question', 'type', 'order', 'lesson')
    list_filter = ('type', 'lesson__unit__course')
    search_fields = ('question', 'lesson__title')
    list_select_related = ('lesson',)
    inlines = [ChallengeOptionInline]


@admin.register(ChallengeOption)
class ChallengeOptionAdmin(admin.ModelAdmin):
    """Admin configuration for the ChallengeOption model."""
    list_display = ('text', 'correct', 'challenge')
    list_filter = ('correct',)
    search_fields = ('text', 'challenge__question')


@admin.register(ChallengeProgress)
class ChallengeProgressAdmin(admin.ModelAdmin):
    """Admin configuration for the ChallengeProgress model."""
    list_display = ('get_user', 'challenge', 'completed')
    list_filter = ('completed',)
    search_fields = ('user__username',)

    @admin.display(description='User')
    def get_user(self, obj) -> str:
        """Return the username the progress belongs to."""
        return obj.user.username if obj.user else 'N/A'


@admin.register(UserProgress)
class UserProgressAdmin(admin.ModelAdmin):
    """Admin configuration for the UserProgress model."""
    list_display = ('user_name', 'active_course', 'hearts', 'points')
    list_filter = ('active_course',)
    search_fields = ('user_name', 'user__username')
    ordering = ('-points',)


@admin.register(UserSubscription)
class UserSubscriptionAdmin(admin.ModelAdmin):
    """Admin configuration for the UserSubscription model."""
    list_display = ('user', 'stripe_price_id', 'stripe_current_period_end', 'get_is_active')
    search_fields = ('user__username', 'stripe_customer_id', 'stripe_subscription_id')

    @admin.display(description='Active', boolean=True)
    def get_is_active(self, obj) -> bool:
        """Return whether the subscription currently grants unlimited hearts."""
        return obj.is_active
