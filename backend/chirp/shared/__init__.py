"""
Shared Module

Contains the application core used by the API layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: External service integrations
- Realtime: WebSocket connection registry

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← External services (Slack)
    ├── utils/          ← Password hashing, JWT
    ├── migrations/     ← Alembic environment and revisions
    └── realtime.py     ← Connected WebSocket clients

Usage:
======
    from chirp.shared.models import User, Post
    from chirp.shared.repositories import UserRepository
    from chirp.shared.services import AuthService
    from chirp.shared.schemas import UserCreate, TokenResponse
    from chirp.shared.core import logger, ChirpException
"""
