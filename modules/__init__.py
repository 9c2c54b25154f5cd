"""
Modules Package - Alle Anwendungsmodule

Dieses Package enthält alle Anwendungsmodule:
- shared: Gemeinsame Funktionen (Database, Logging, Config, Connectors)
- spend_reader: PDF Upload → Spend-Ledger
- dashboard: Metrik-Abgleich GA4 + Spend

Verwendung:
    from modules.shared import db_connect, create_module_logger
    from modules.dashboard import router as dashboard_router
    from modules.spend_reader import router as spend_router
"""

__version__ = "1.0.0"
