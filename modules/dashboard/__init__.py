"""
Dashboard Module

Marketing-Dashboard:
- Metrik-Abgleich GA4 (bezahlte Channel Groups) + Spend-Ledger
- Degraded Mode mit markierten Platzhaltern
- Kurzübersicht pro User

Module-Struktur:
- router.py: FastAPI Endpoints
- schemas.py: Response-Schemas
- services/: Business Logic
"""

from .router import router, get_router

__all__ = ["router", "get_router"]
__version__ = "1.0.0"
