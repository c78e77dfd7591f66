"""Tests for the core Django app."""

# pylint: disable=no-member

from datetime import timedelta

from django.contrib.auth.models import AnonymousUser, User
from django.test import Client, RequestFactory, TestCase, override_settings
from django.urls import reverse
from django.utils import timezone

from .constants import MAX_HEARTS, get_quest_progress
from .exceptions import (
    ApplicationError,
    CourseEmptyError,
    HeartsFullError,
    InsufficientPointsError,
    NotFoundError,
    UnauthorizedError,
)
from .models import (
    Challenge,
    ChallengeOption,
    ChallengeProgress,
    Course,
    Lesson,
    Unit,
    UserProgress,
    UserSubscription,
)
from .permissions import is_admin
from .request_cache import (
    end_request_cache,
    invalidate_request_cache,
    request_cache,
    start_request_cache,
)
from .view_helpers import build_sidebar_context


class CoreModelTests(TestCase):
    """Tests for the models in the core app."""

    @classmethod
    def setUpTestData(cls):
        """Set up non-modified objects used by all test methods."""
        cls.user = User.objects.create_user(username="testuser", password="password123")
        cls.course = Course.objects.create(title="Spanish", image_src="/es.svg")
        cls.unit = Unit.objects.create(
            course=cls.course, title="Unit 1", description="Learn the basics of Spanish", order=1
        )
        cls.lesson = Lesson.objects.create(unit=cls.unit, title="Nouns", order=1)
        cls.challenge = Challenge.objects.create(
            lesson=cls.lesson,
            type=Challenge.ChallengeType.SELECT,
            question='Which one of these is the "man"?',
            order=1,
        )
        cls.option = ChallengeOption.objects.create(
            challenge=cls.challenge, text="el hombre", correct=True, image_src="/man.svg"
        )

    def test_course_creation(self):
        """Test Course model instance creation and __str__."""
        self.assertEqual(self.course.title, "Spanish")
        self.assertEqual(str(self.course), "Spanish")

    def test_unit_creation(self):
        """Test Unit model instance creation and __str__."""
        self.assertEqual(self.unit.course, self.course)
        self.assertEqual(str(self.unit), f"Unit 1: Unit 1 (Course: {self.course.pk})")

    def test_lesson_creation(self):
        """Test Lesson model instance creation and __str__."""
        self.assertEqual(self.lesson.unit, self.unit)
        self.assertEqual(str(self.lesson), f"Lesson 1: Nouns (Unit: {self.unit.pk})")

    def test_challenge_and_option_creation(self):
        """Test Challenge and ChallengeOption creation and __str__."""
        self.assertEqual(list(self.lesson.challenges.all()), [self.challenge])
        self.assertEqual(list(self.challenge.options.all()), [self.option])
        self.assertIsNone(self.option.audio_src)
        self.assertEqual(str(self.option), "el hombre (correct)")
        self.assertTrue(str(self.challenge).startswith("Challenge 1 (SELECT)"))

    def test_challenge_progress_defaults_to_not_completed(self):
        """A new ChallengeProgress row is not completed."""
        progress = ChallengeProgress.objects.create(user=self.user, challenge=self.challenge)
        self.assertFalse(progress.completed)
        self.assertIn("in progress", str(progress))

    def test_user_progress_defaults(self):
        """UserProgress starts with full hearts, no points and default profile."""
        progress = UserProgress.objects.create(user=self.user)
        self.assertEqual(progress.hearts, MAX_HEARTS)
        self.assertEqual(progress.points, 0)
        self.assertEqual(progress.user_name, "User")
        self.assertEqual(progress.user_image_src, "/mascot.svg")
        self.assertIsNone(progress.active_course)
        self.assertEqual(progress.pk, self.user.pk)

    def test_deleting_active_course_keeps_user_progress(self):
        """The active course is cleared, not cascaded, when the course goes away."""
        other_course = Course.objects.create(title="French", image_src="/fr.svg")
        progress = UserProgress.objects.create(user=self.user, active_course=other_course)
        other_course.delete()
        progress.refresh_from_db()
        self.assertIsNone(progress.active_course)


class UserSubscriptionTests(TestCase):
    """Tests for UserSubscription.is_active."""

    def setUp(self):
        self.user = User.objects.create_user(username="subscriber", password="password123")

    def _subscription(self, period_end, price_id="price_pro"):
        return UserSubscription.objects.create(
            user=self.user,
            stripe_customer_id="cus_1",
            stripe_subscription_id="sub_1",
            stripe_price_id=price_id,
            stripe_current_period_end=period_end,
        )

    def test_active_during_paid_period(self):
        subscription = self._subscription(timezone.now() + timedelta(days=10))
        self.assertTrue(subscription.is_active)

    def test_active_during_grace_day(self):
        subscription = self._subscription(timezone.now() - timedelta(hours=12))
        self.assertTrue(subscription.is_active)

    def test_inactive_after_grace_day(self):
        subscription = self._subscription(timezone.now() - timedelta(days=2))
        self.assertFalse(subscription.is_active)

    def test_inactive_without_price(self):
        subscription = self._subscription(timezone.now() + timedelta(days=10), price_id="")
        self.assertFalse(subscription.is_active)


class RequestCacheTests(TestCase):
    """Tests for the request-scoped memoization."""

    def setUp(self):
        self.calls = []

        @request_cache
        def lookup(value):
            self.calls.append(value)
            return value * 2

        self.lookup = lookup
        self.addCleanup(end_request_cache)

    def test_passes_through_outside_a_request(self):
        self.assertEqual(self.lookup(2), 4)
        self.assertEqual(self.lookup(2), 4)
        self.assertEqual(self.calls, [2, 2])

    def test_memoizes_within_a_request(self):
        start_request_cache()
        self.assertEqual(self.lookup(2), 4)
        self.assertEqual(self.lookup(2), 4)
        self.assertEqual(self.lookup(3), 6)
        self.assertEqual(self.calls, [2, 3])

    def test_invalidate_forgets_previous_reads(self):
        start_request_cache()
        self.lookup(2)
        invalidate_request_cache()
        self.lookup(2)
        self.assertEqual(self.calls, [2, 2])

    def test_new_request_starts_empty(self):
        start_request_cache()
        self.lookup(2)
        end_request_cache()
        start_request_cache()
        self.lookup(2)
        self.assertEqual(self.calls, [2, 2])

    def test_model_instances_are_keyed_by_primary_key(self):
        user = User.objects.create_user(username="cached", password="password123")
        start_request_cache()

        @request_cache
        def username(u):
            self.calls.append(u.pk)
            return u.username

        username(user)
        username(User.objects.get(pk=user.pk))
        self.assertEqual(self.calls, [user.pk])


class PermissionTests(TestCase):
    """Tests for is_admin."""

    def test_anonymous_is_not_admin(self):
        self.assertFalse(is_admin(AnonymousUser()))
        self.assertFalse(is_admin(None))

    def test_superuser_is_admin(self):
        user = User.objects.create_superuser(username="root", password="password123")
        self.assertTrue(is_admin(user))

    @override_settings(LINGO_ADMIN_USERNAMES=["editor"])
    def test_listed_username_is_admin(self):
        editor = User.objects.create_user(username="editor", password="password123")
        learner = User.objects.create_user(username="learner", password="password123")
        self.assertTrue(is_admin(editor))
        self.assertFalse(is_admin(learner))


class ConstantsTests(TestCase):
    """Tests for helpers in core.constants."""

    def test_quest_progress_is_capped(self):
        self.assertEqual(get_quest_progress(10, 20), 50.0)
        self.assertEqual(get_quest_progress(40, 20), 100.0)
        self.assertEqual(get_quest_progress(0, 20), 0.0)


class CoreViewTests(TestCase):
    """Tests for the views in the core app."""

    def setUp(self):
        """Set up the test client and a user."""
        self.client = Client()
        self.user = User.objects.create_user(
            username="testuser_view", password="password123", email="test@example.com"
        )
        self.register_url = reverse("register")
        self.login_url = reverse("login")
        self.index_url = reverse("index")

    def test_index_view_anonymous(self):
        """Test the index view renders the landing page for anonymous users."""
        response = self.client.get(self.index_url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "core/index.html")

    def test_index_view_redirects_authenticated(self):
        """Signed-in users go straight to the learn page."""
        self.client.login(username="testuser_view", password="password123")
        response = self.client.get(self.index_url)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse("learn:learn"))

    def test_register_view_get(self):
        """Test the register view returns 200 for GET requests."""
        response = self.client.get(self.register_url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "registration/register.html")

    def test_register_view_post_success(self):
        """Test successful user registration via POST request."""
        user_data = {
            "username": "newuser",
            "password1": "Tr4vel-Phrases-2024",
            "password2": "Tr4vel-Phrases-2024",
        }
        response = self.client.post(self.register_url, user_data)
        self.assertRedirects(response, self.login_url)
        self.assertTrue(User.objects.filter(username="newuser").exists())

    def test_register_view_post_existing_username(self):
        """Test user registration failure with an existing username."""
        user_data = {
            "username": "testuser_view",
            "password1": "password123",
            "password2": "password123",
        }
        response = self.client.post(self.register_url, user_data)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "registration/register.html")
        self.assertContains(response, "A user with that username already exists.")


class SidebarContextTests(TestCase):
    """Tests for build_sidebar_context."""

    def test_sidebar_for_free_user_shows_promo(self):
        user = User.objects.create_user(username="sidebar", password="password123")
        progress = UserProgress.objects.create(user=user, hearts=3, points=40)
        request = RequestFactory().get("/")
        request.user = user

        context = build_sidebar_context(request, progress, None)

        self.assertEqual(context["hearts"], 3)
        self.assertEqual(context["points"], 40)
        self.assertEqual(context["max_hearts"], MAX_HEARTS)
        self.assertFalse(context["is_pro"])
        self.assertTrue(context["show_promo"])
        self.assertFalse(context["is_admin"])


class ExceptionTests(TestCase):
    """Tests for the application error hierarchy."""

    def test_status_codes(self):
        self.assertEqual(UnauthorizedError("x").status_code, 401)
        self.assertEqual(NotFoundError("x").status_code, 404)
        for error in (CourseEmptyError, HeartsFullError, InsufficientPointsError):
            self.assertTrue(issubclass(error, ApplicationError))
            self.assertEqual(error("x").status_code, 400)
