"""Pydantic schemas describing the student API.

The store accepts arbitrary fields, so these models are not used to
validate requests. They exist to give the generated OpenAPI document a
concrete shape (`name`, `age`) and the examples shown in the docs UI.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class StudentIn(BaseModel):
    """Fields supplied by the caller when creating or replacing a student."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(default=None, description="The student's name.")
    age: Optional[int] = Field(default=None, description="The student's age.")


class Student(StudentIn):
    """A stored student record including its assigned id."""
    id: int = Field(description="The student's ID.")


NEW_STUDENT_EXAMPLES = {
    "NewStudent": {"value": {"name": "Charlie", "age": 21}},
}

UPDATED_STUDENT_EXAMPLES = {
    "UpdatedStudent": {"value": {"name": "Alice Smith", "age": 21}},
}

STUDENTS_ARRAY_EXAMPLE = [
    {"id": 1, "name": "Alice", "age": 20},
    {"id": 2, "name": "Bob", "age": 22},
]
