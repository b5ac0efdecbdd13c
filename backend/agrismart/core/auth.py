# backend/agrismart/core/auth.py

from uuid import UUID

import jwt
from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from agrismart.core.config import settings
from agrismart.core.errors import ConfigurationError

security = HTTPBearer()


# ------------------------------------------------
# SUPABASE TOKEN VERIFICATION
# ------------------------------------------------
def verify_token(token: str):
    if not settings.SUPABASE_JWT_SECRET:
        raise ConfigurationError("SUPABASE_JWT_SECRET is not configured")

    try:
        payload = jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[settings.ALGORITHM],
            options={"verify_exp": True, "verify_aud": False},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="Invalid token")

    return payload


async def require_user(credentials: HTTPAuthorizationCredentials = Depends(security)):
    return verify_token(credentials.credentials)


async def get_current_user_id(payload: dict = Depends(require_user)) -> str:
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token has no subject")

    # canonical lowercase hyphenated form, as stored in the uuid columns
    try:
        return str(UUID(str(user_id)))
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token subject")
