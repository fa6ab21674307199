import hashlib, hmac
import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt
from fastapi import HTTPException, Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import HASH_KEY, JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from logger import LOGGER_NAME
from models.user import UserModel

# Bộ nhớ tạm lưu token bị revoke -> thời điểm hết hạn (chỉ sống trong session server)
revoked_tokens: Dict[str, float] = {}
bearer_scheme = HTTPBearer(auto_error=False)
ADMIN_ROLE = 1

#=========================PASSWORD HASH=======================================
def hash_password(password: str, logger: Optional[logging.Logger] = None) -> Optional[str]:
    """
    Băm mật khẩu bằng HMAC-SHA256 với HASH_KEY.

    Không raise: input không hợp lệ (None, không phải str, chuỗi không
    encode được UTF-8) hoặc thiếu HASH_KEY thì log lỗi và trả về None.
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    try:
        return hmac.new(HASH_KEY.encode(), password.encode(), hashlib.sha256).hexdigest()
    except (AttributeError, TypeError, UnicodeError) as e:
        logger.error("Error while hashing password: %s", e)
        return None

def compare_password(password: str, hashed_password: str) -> bool:
    if not isinstance(hashed_password, str):
        return False
    candidate = hash_password(password)
    if candidate is None:
        return False
    return hmac.compare_digest(candidate, hashed_password)

#==========================JWT TOKEN==========================================
def create_access_token(user_id: int, email: str, role: int = 0) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(user_id),       # subject = user_id
        "email": email,
        "role": role,
        "exp": expire
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)

def verify_access_token(token: str) -> Optional[dict]:
    if token in revoked_tokens:
        return None
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None

def prune_revoked_tokens(now: Optional[float] = None):
    """Bỏ các token đã hết hạn, vì jwt.decode đã tự từ chối chúng."""
    now = time.time() if now is None else now
    for token, expires_at in list(revoked_tokens.items()):
        if expires_at <= now:
            del revoked_tokens[token]

def revoke_token(token: str):
    try:
        payload = jwt.decode(
            token, JWT_SECRET, algorithms=[JWT_ALGORITHM], options={"verify_exp": False}
        )
    except jwt.InvalidTokenError:
        # token sai chữ ký thì verify đã từ chối, không cần lưu
        return
    revoked_tokens[token] = float(payload.get("exp", float("inf")))
    prune_revoked_tokens()

def extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    # Ưu tiên Bearer token, fallback cookie
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get("access_token")

#===============user helper===============================
async def require_sign_in(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Security(bearer_scheme)
) -> dict:
    token = extract_token(request, credentials)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = verify_access_token(token)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token payload")

    user = await UserModel.find_one({"_id": int(user_id)})
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    # loại bỏ password khi trả ra
    return {k: v for k, v in user.items() if k != "password"}

async def require_admin(current_user: dict = Depends(require_sign_in)) -> dict:
    if current_user.get("role") != ADMIN_ROLE:
        raise HTTPException(status_code=403, detail="Admin access required")
    return current_user
