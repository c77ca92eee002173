"""
Test suite for Bank Account Service.

Architecture: Hexagonal (Ports & Adapters)
Testing Strategy:
- Unit tests: Request validation, domain entities, use cases, adapters
- API tests: FastAPI app over httpx ASGI transport with in-memory repository
- Integration tests: Alembic migrations against PostgreSQL (marked integration)
"""
