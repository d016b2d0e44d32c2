import sys
import os
import pytest

# Add the project root directory to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import portfolio_builder.db as db
from portfolio_builder.models import PortfolioDocument


@pytest.fixture
def db_conn(tmp_path, monkeypatch):
    """
    One on-disk SQLite connection per test with the schema (and seeded templates) in place.
    """
    db_path = tmp_path / "test.db"
    monkeypatch.setenv("APP_DB_PATH", str(db_path))

    conn = db.connect()
    db.init_schema(conn)

    yield conn

    conn.close()


@pytest.fixture
def test_user_id(db_conn):
    """A plain (non-admin) user in the shared test database."""
    return db.get_or_create_user(db_conn, "test-user")


@pytest.fixture
def admin_user_id(db_conn):
    user_id = db.get_or_create_user(db_conn, "admin-user")
    db.set_user_role(db_conn, user_id, "admin")
    return user_id


@pytest.fixture
def portfolio_data():
    """Builder-style payload (camelCase keys, like the web form sends)."""
    return {
        "name": "Ada's Portfolio",
        "personalInfo": {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "headline": "Analytical Engine Programmer",
            "about": "I write programs for machines that do not exist yet.",
            "profilePhotoUrl": "https://example.com/ada.png",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "socialLinks": [
                {"platform": "GitHub", "url": "https://github.com/ada"},
                {"platform": "LinkedIn", "url": "https://linkedin.com/in/ada"},
                {"platform": "Mastodon", "url": "https://mastodon.social/@ada"},
            ],
        },
        "skills": [
            {"name": "Python", "proficiency": 5, "category": "Backend Development"},
            {"name": "CSS", "proficiency": 3, "category": "Frontend Development"},
            {"name": "SQL", "proficiency": 4, "category": "Backend Development"},
            {"name": "Mentoring", "proficiency": 4},
        ],
        "projects": [
            {
                "title": "Bernoulli Numbers",
                "description": "The first published algorithm.",
                "technologies": ["Analytical Engine", "Punch cards"],
                "imageUrl": "https://example.com/notes.png",
                "liveUrl": "https://example.com/live",
                "codeUrl": "https://example.com/code",
            }
        ],
        "education": [
            {
                "institution": "University of London",
                "degree": "Mathematics",
                "startDate": "1840",
                "endDate": "1843",
                "description": "Studied with Augustus De Morgan.",
            },
            {
                "institution": "Babbage Engines, Inc.",
                "degree": "Programmer",
                "startDate": "1843",
            },
        ],
        "colorScheme": {
            "primary": "#3b82f6",
            "secondary": "#4f46e5",
            "accent": "#8b5cf6",
            "background": "#ffffff",
            "text": "#1e293b",
        },
    }


@pytest.fixture
def sample_portfolio(portfolio_data):
    return PortfolioDocument.model_validate(portfolio_data)


@pytest.fixture
def empty_portfolio():
    return PortfolioDocument(name="Empty")
