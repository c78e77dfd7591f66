"""Builders for course content used by the test suites of every app."""

# pylint: disable=no-member

from core.models import Challenge, ChallengeOption, Course, Lesson, Unit


def build_course(title="Spanish", lessons_per_unit=((3, 2), (1, 0))):
    """
    Creates a course whose units hold lessons with the given challenge counts.

    Units and challenges are inserted in reverse order so tests notice code
    that relies on insertion order instead of the `order` field. Every
    challenge gets one correct and one wrong option.

    Returns:
        (course, units, lessons) with units and lessons in their intended order.
    """
    course = Course.objects.create(title=title, image_src=f"/{title[:2].lower()}.svg")
    units = []
    for unit_order in reversed(range(1, len(lessons_per_unit) + 1)):
        unit = Unit.objects.create(
            course=course,
            title=f"Unit {unit_order}",
            description=f"Learn the basics of {title}",
            order=unit_order,
        )
        units.insert(0, unit)

    lessons = []
    for unit, challenge_counts in zip(units, lessons_per_unit):
        for lesson_order, challenge_count in enumerate(challenge_counts, start=1):
            lesson = Lesson.objects.create(
                unit=unit, title=f"{unit.title} Lesson {lesson_order}", order=lesson_order
            )
            for challenge_order in reversed(range(1, challenge_count + 1)):
                challenge = Challenge.objects.create(
                    lesson=lesson,
                    type=Challenge.ChallengeType.SELECT,
                    question=f"Question {challenge_order} of {lesson.title}",
                    order=challenge_order,
                )
                ChallengeOption.objects.create(challenge=challenge, text="right", correct=True)
                ChallengeOption.objects.create(challenge=challenge, text="wrong", correct=False)
            lessons.append(lesson)

    return course, units, lessons


def ordered_challenges(lesson):
    return list(lesson.challenges.order_by("order"))
