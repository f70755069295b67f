from .registry import register, get_exercise, available_exercises
from .cities import CitiesExercise
from .integers import IntegersExercise
from .companies import CompaniesExercise
from .employees import EmployeesExercise
from .students import StudentsExercise

for _exercise in (CitiesExercise, IntegersExercise, CompaniesExercise, EmployeesExercise, StudentsExercise):
    register(_exercise)

__all__ = [
    "register",
    "get_exercise",
    "available_exercises",
]
