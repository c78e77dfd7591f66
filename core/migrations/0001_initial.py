import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(help_text="The display name of the course.", max_length=255)),
                ("image_src", models.CharField(help_text="Path of the flag/illustration shown for the course.", max_length=255)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Unit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(help_text="The title of the unit.", max_length=255)),
                ("description", models.TextField(help_text="A short description shown in the unit banner.")),
                ("order", models.IntegerField(help_text="Position of the unit within its course.")),
                ("course", models.ForeignKey(help_text="The course this unit belongs to.", on_delete=django.db.models.deletion.CASCADE, related_name="units", to="core.course")),
            ],
            options={
                "ordering": ["course", "order"],
                "indexes": [models.Index(fields=["course", "order"], name="unit_course_order_idx")],
            },
        ),
        migrations.CreateModel(
            name="Lesson",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(help_text="The title of the lesson.", max_length=255)),
                ("order", models.IntegerField(help_text="Position of the lesson within its unit.")),
                ("unit", models.ForeignKey(help_text="The unit this lesson belongs to.", on_delete=django.db.models.deletion.CASCADE, related_name="lessons", to="core.unit")),
            ],
            options={
                "ordering": ["unit", "order"],
                "indexes": [models.Index(fields=["unit", "order"], name="lesson_unit_order_idx")],
            },
        ),
        migrations.CreateModel(
            name="Challenge",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=[("SELECT", "Select"), ("ASSIST", "Assist")], help_text="How the challenge is presented.", max_length=10)),
                ("question", models.TextField(help_text="The question shown to the learner.")),
                ("order", models.IntegerField(help_text="Position of the challenge within its lesson.")),
                ("lesson", models.ForeignKey(help_text="The lesson this challenge belongs to.", on_delete=django.db.models.deletion.CASCADE, related_name="challenges", to="core.lesson")),
            ],
            options={
                "ordering": ["lesson", "order"],
                "indexes": [models.Index(fields=["lesson", "order"], name="challenge_lesson_order_idx")],
            },
        ),
        migrations.CreateModel(
            name="ChallengeOption",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("text", models.CharField(help_text="The answer text.", max_length=255)),
                ("correct", models.BooleanField(help_text="Whether choosing this option answers the challenge correctly.")),
                ("image_src", models.CharField(blank=True, help_text="Optional illustration for the option.", max_length=255, null=True)),
                ("audio_src", models.CharField(blank=True, help_text="Optional pronunciation audio for the option.", max_length=255, null=True)),
                ("challenge", models.ForeignKey(help_text="The challenge this option answers.", on_delete=django.db.models.deletion.CASCADE, related_name="options", to="core.challenge")),
            ],
            options={
                "verbose_name": "Challenge Option",
                "verbose_name_plural": "Challenge Options",
                "ordering": ["challenge", "id"],
            },
        ),
        migrations.CreateModel(
            name="ChallengeProgress",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("completed", models.BooleanField(default=False, help_text="Whether the challenge was answered correctly.")),
                ("challenge", models.ForeignKey(help_text="The challenge the progress relates to.", on_delete=django.db.models.deletion.CASCADE, related_name="progress", to="core.challenge")),
                ("user", models.ForeignKey(help_text="The user whose progress is being tracked.", on_delete=django.db.models.deletion.CASCADE, related_name="challenge_progress", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Challenge Progress",
                "verbose_name_plural": "Challenge Progress Records",
                "indexes": [models.Index(fields=["user", "challenge"], name="progress_user_challenge_idx")],
            },
        ),
        migrations.CreateModel(
            name="UserProgress",
            fields=[
                ("user", models.OneToOneField(help_text="The user this state belongs to.", on_delete=django.db.models.deletion.CASCADE, primary_key=True, related_name="user_progress", serialize=False, to=settings.AUTH_USER_MODEL)),
                ("user_name", models.CharField(default="User", help_text="Name shown on the leaderboard.", max_length=255)),
                ("user_image_src", models.CharField(default="/mascot.svg", help_text="Avatar shown on the leaderboard.", max_length=255)),
                ("hearts", models.IntegerField(default=5, help_text="Remaining hearts; a wrong first attempt costs one.")),
                ("points", models.IntegerField(default=0, help_text="Experience points earned.")),
                ("active_course", models.ForeignKey(blank=True, help_text="The course the user is currently studying.", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to="core.course")),
            ],
            options={
                "verbose_name": "User Progress",
                "verbose_name_plural": "User Progress Records",
                "indexes": [models.Index(fields=["points"], name="userprogress_points_idx")],
            },
        ),
        migrations.CreateModel(
            name="UserSubscription",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("stripe_customer_id", models.CharField(max_length=255, unique=True)),
                ("stripe_subscription_id", models.CharField(max_length=255, unique=True)),
                ("stripe_price_id", models.CharField(blank=True, default="", max_length=255)),
                ("stripe_current_period_end", models.DateTimeField(help_text="End of the currently paid period.")),
                ("user", models.OneToOneField(help_text="The subscribed user.", on_delete=django.db.models.deletion.CASCADE, related_name="subscription", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "User Subscription",
                "verbose_name_plural": "User Subscriptions",
            },
        ),
    ]
