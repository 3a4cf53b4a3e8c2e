"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Security headers middleware
- Rate limiting
- Logging configuration
"""
