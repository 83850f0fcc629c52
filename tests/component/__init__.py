"""
Component tests for the storefront service

Component tests run the FastAPI routes, services and repositories together
against an in-memory database. Only the external collaborators (auth service,
Redis lock) are replaced.
"""
