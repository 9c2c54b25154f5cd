"""
Spend Reader Module

PDF Upload und Verarbeitung von Spend-Reports:
- Upload-Validierung (PDF, max. 10 MB)
- Textextraktion (pdfplumber)
- Zeilenbasierter Parser → Spend-Einträge
- Speicherung im Spend-Ledger

Module-Struktur:
- router.py: FastAPI Endpoints
- cli.py: Kommandozeile (parse / export)
- services/: Business Logic
"""

from .router import router, get_router

__all__ = ["router", "get_router"]
__version__ = "1.0.0"
