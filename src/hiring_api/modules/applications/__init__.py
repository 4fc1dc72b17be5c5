"""
Applications Module

Handles job application intake:
1. Public submission, stored before anything else happens
2. Best-effort confirmation email to the applicant
3. Staff listing protected by the admin session token

API Endpoints:
- POST /apply - Submit a new application
- GET /applications - List all applications, newest first
"""

from .router import router

__all__ = ["router"]
