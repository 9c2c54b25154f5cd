"""FastAPI Dependencies, die von mehreren Modulen genutzt werden"""

from typing import Optional

from fastapi import Header, HTTPException


async def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    User-ID aus dem Header X-User-Id.

    Die eigentliche Authentifizierung passiert vor dem Gateway
    (Reverse Proxy / Auth-Middleware), hier wird nur die ID übernommen.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()
