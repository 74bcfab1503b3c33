import logging

from fitflash.models.workout import Workout
from fitflash.utils.units import display_volume, display_weight, is_metric


def format_workout_markdown(workout: Workout, unit_system: str = "imperial") -> str:
    """Format a logged workout in a readable markdown format.

    Args:
        workout: The workout to render, weights stored in kg
        unit_system: User's preferred unit system ("imperial" or "metric")

    Returns:
        Formatted markdown string
    """
    logger = logging.getLogger(__name__)
    use_metric = is_metric(unit_system)

    logger.debug(
        f"Formatting workout '{workout.title}' with {len(workout.exercises)} exercises"
    )

    markdown = f"## {workout.title}\n\n"
    if workout.description:
        markdown += f"*{workout.description}*\n\n"

    for exercise in workout.exercises:
        markdown += f"### {exercise.title}\n"

        if exercise.notes:
            markdown += f"*{exercise.notes}*\n\n"

        markdown += "**Sets:**\n"
        for i, set_data in enumerate(exercise.sets, 1):
            set_type = set_data.type.capitalize()

            if set_data.weight_kg is None:
                weight = None
            elif set_data.weight_kg == 0:
                weight = "Bodyweight"
            else:
                weight = display_weight(set_data.weight_kg, use_metric)

            set_info = []
            if set_data.reps is not None:
                set_info.append(f"{set_data.reps} reps")
            if weight:
                set_info.append(weight)
            if set_data.duration_seconds:
                set_info.append(f"{set_data.duration_seconds}s")

            markdown += f"{i}. {set_type}: {', '.join(set_info)}\n"

        volume = exercise.total_volume(use_metric)
        markdown += f"*Volume: {display_volume(volume, use_metric, is_already_converted=True)}*\n\n"

    total = workout.total_volume(use_metric)
    markdown += f"**Total volume:** {display_volume(total, use_metric, is_already_converted=True)}\n"
    return markdown
