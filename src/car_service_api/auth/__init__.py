"""
car_service_api.auth

Authentication package.

Responsibilities:
- JWT issuing and validation helpers.
- Session cookie attributes.
- FastAPI access-guard dependencies (Principal + identity isolation).
"""

# Package marker.
