import logging

from fastapi import APIRouter, HTTPException, Depends, Request, Response, Security
from fastapi.security import HTTPAuthorizationCredentials

from logger import get_logger
from models.user import RegisterRequest, LoginRequest, UserModel
from response_formatter import success_response, error_response
from services.auth_service import (
    hash_password,
    compare_password,
    create_access_token,
    require_sign_in,
    revoke_token,
    extract_token,
    bearer_scheme,
)


router = APIRouter(prefix="/api/v1/auth", tags=["Auth"])

# ========== REGISTER ==========
@router.post("/register")
async def register(req: RegisterRequest, logger: logging.Logger = Depends(get_logger)):
    if await UserModel.find_one({"email": req.email}):
        return error_response("Email already registered", status_code=400, code="USER_EXISTS")

    password_hash = hash_password(req.password, logger)
    if password_hash is None:
        return error_response("Password could not be processed", status_code=400, code="INVALID_PASSWORD")

    user = await UserModel(
        name=req.name,
        email=req.email,
        password=password_hash,
        role=0,
    ).save()
    logger.info("Registered user %s", user["_id"])
    return success_response("User registered successfully", data={"_id": user["_id"], "email": user["email"]})

# ========== LOGIN ==========
@router.post("/login")
async def login(req: LoginRequest, response: Response):
    user = await UserModel.find_one({"email": req.email})

    # Không tìm thấy user hoặc sai mật khẩu
    if not user or not compare_password(req.password, user["password"]):
        return error_response("Invalid credentials", status_code=401, code="INVALID_CREDENTIALS")

    token = create_access_token(user_id=user["_id"], email=user["email"], role=user.get("role", 0))

    # Lưu token vào cookie (HTTPOnly)
    response.set_cookie(
        key="access_token",
        value=token,
        httponly=True,
        samesite="lax"
    )
    return success_response("Login successful", data={"access_token": token})

# ========== GET PROFILE ==========
@router.get("/me")
async def me(current_user: dict = Depends(require_sign_in)):
    return {"user": current_user}

#==================LOGOUT=============
@router.post("/logout")
def logout(request: Request, response: Response, credentials: HTTPAuthorizationCredentials = Security(bearer_scheme)):
    token = extract_token(request, credentials)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    revoke_token(token)
    response.delete_cookie("access_token")
    return success_response("Logged out successfully")
