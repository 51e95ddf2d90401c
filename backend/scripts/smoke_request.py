"""Drive the student lifecycle against an in-process app.

Usage: python backend/scripts/smoke_request.py
Each step prints its status code and body for a quick manual check.
"""

import sys
import os

# Ensure backend folder is on sys.path so `student_api` can be imported when run directly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from student_api.main import create_app

STEPS = [
    ('POST', '/students', {'name': 'Alice', 'age': 20}),
    ('GET', '/students/1', None),
    ('PUT', '/students/1', {'name': 'Alice Smith', 'age': 21}),
    ('GET', '/students', None),
    ('DELETE', '/students/1', None),
    ('GET', '/students/1', None),
]


def main():
    """Run every step in order against a fresh application."""
    client = TestClient(create_app())
    for method, path, body in STEPS:
        resp = client.request(method, path, json=body)
        print(f'{method} {path} -> {resp.status_code}', resp.text or '<no body>')


if __name__ == '__main__':
    main()
