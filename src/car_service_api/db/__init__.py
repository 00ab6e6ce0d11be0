"""
car_service_api.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, repositories and catalog seeding.
"""

# Package marker.
