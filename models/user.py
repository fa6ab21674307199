from pydantic import BaseModel, EmailStr
from typing import Optional

from database.document import Document


class UserModel(Document):
    collection_name = "users"


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
