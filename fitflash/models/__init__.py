"""Data models for workouts and form feedback."""
