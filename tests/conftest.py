import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.models import Grade


@pytest.fixture
def sample_grades():
    """Two subjects, mixed weights, timestamps deliberately interleaved."""
    return [
        Grade(value=8.0, weight=1.0, subject="Math", description="Test 1", timestamp=1000),
        Grade(value=7.0, weight=2.0, subject="Math", description="Test 2", timestamp=2000),
        Grade(value=6.0, weight=1.0, subject="English", description="Test 1", timestamp=1500),
        Grade(value=9.0, weight=1.0, subject="English", description="Test 2", timestamp=2500),
    ]


@pytest.fixture
def math_history():
    return [
        Grade(value=7.0, subject="Math", description="Test 1", timestamp=1000),
        Grade(value=8.0, subject="Math", description="Test 2", timestamp=2000),
        Grade(value=6.0, subject="Math", description="Test 3", timestamp=3000),
        Grade(value=7.5, subject="Math", description="Test 4", timestamp=4000),
    ]
