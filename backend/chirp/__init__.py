"""
Chirp Backend

Social network API: users, posts, likes, followers, direct messages and
real-time notifications.

Package Structure:
==================
    chirp/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn chirp.api.main:app --reload

    # Or
    python -m chirp.api
"""
