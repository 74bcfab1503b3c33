from typing import List, Optional

from pydantic import BaseModel, Field

from fitflash.utils.units import calculate_volume, kg_to_lbs


class WorkoutSet(BaseModel):
    index: int
    type: str = "normal"  # "normal", "warmup", "dropset", "failure"
    weight_kg: Optional[float] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    duration_seconds: Optional[int] = None

    def volume_kg(self) -> float:
        """Weight x reps in kg, 0 for sets without both."""
        if not self.weight_kg or not self.reps:
            return 0.0
        return calculate_volume(self.weight_kg, self.reps, True)


class ExerciseLog(BaseModel):
    index: int
    title: str
    notes: Optional[str] = None
    sets: List[WorkoutSet] = Field(default_factory=list)

    def total_volume(self, use_metric: bool) -> float:
        # Sum in kg and convert once; converting per set compounds rounding
        volume_kg = sum(s.volume_kg() for s in self.sets)
        return volume_kg if use_metric else kg_to_lbs(volume_kg, snap=False)


class Workout(BaseModel):
    title: str
    description: Optional[str] = None
    exercises: List[ExerciseLog] = Field(default_factory=list)

    def total_volume(self, use_metric: bool) -> float:
        volume_kg = sum(e.total_volume(True) for e in self.exercises)
        return volume_kg if use_metric else kg_to_lbs(volume_kg, snap=False)
