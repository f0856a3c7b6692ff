from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS, BCRYPT_ROUNDS
from app.database import get_db
from app.exceptions import Unauthorized, Forbidden, InvalidToken
from app.models.user_model import User
from app.models.admin_model import Admin, ADMIN_USERNAME
from app.schemas.user_schema import Role, TokenClaims
from app.logger import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)
security = HTTPBearer(auto_error=False)


# CREDENTIALS

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        # Hash anyway so an unknown email costs the same as a wrong password
        pwd_context.dummy_verify()
        raise Unauthorized("Invalid credentials")
    if not verify_password(password, user.password_hash):
        raise Unauthorized("Invalid credentials")
    return user


def authenticate_admin(db: Session, password: str) -> Admin:
    admin = db.query(Admin).filter(Admin.username == ADMIN_USERNAME).first()
    if not admin:
        pwd_context.dummy_verify()
        raise Unauthorized("Invalid credentials")
    if not verify_password(password, admin.password_hash):
        raise Unauthorized("Invalid credentials")
    return admin


# SESSION TOKENS

def create_access_token(
    subject_id: int,
    role: Role,
    extra_claims: Optional[dict] = None,
    expires_delta: Optional[timedelta] = None,
):
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)

    to_encode = dict(extra_claims or {})
    to_encode.update({
        "sub": str(subject_id),
        "role": Role(role).value,
        "exp": expire,
        "iat": now,
        "jti": str(uuid4()),
    })
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt, expire


def verify_token(token: str) -> TokenClaims:
    """Decode a session token, raising InvalidToken unless it is fully trustworthy.

    python-jose checks the signature and the ``exp`` claim; on top of that the
    subject must be a numeric id and the role one of the known roles.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    subject = payload.get("sub")
    role = payload.get("role")
    exp = payload.get("exp")
    if subject is None or role is None or exp is None:
        raise InvalidToken("Token is missing required claims")

    try:
        return TokenClaims(
            subject_id=int(subject),
            role=Role(role),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
            email=payload.get("email"),
        )
    except (TypeError, ValueError) as e:
        raise InvalidToken("Token claims are malformed") from e


# AUTHORIZATION GUARD

def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenClaims:
    if credentials is None:
        raise Unauthorized("No token provided")
    try:
        return verify_token(credentials.credentials)
    except InvalidToken as e:
        logger.info(f"Rejected bearer token: {e}")
        raise Unauthorized("Invalid token")


def get_optional_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[TokenClaims]:
    """Claims for public routes: a missing or unusable token means an anonymous caller"""
    if credentials is None:
        return None
    try:
        return verify_token(credentials.credentials)
    except InvalidToken as e:
        logger.debug(f"Ignoring unusable bearer token on public route: {e}")
        return None


def get_current_admin(claims: TokenClaims = Depends(get_token_claims)) -> TokenClaims:
    if claims.role != Role.admin:
        raise Forbidden("Admin access required")
    return claims


def get_current_user(
    claims: TokenClaims = Depends(get_token_claims),
    db: Session = Depends(get_db),
) -> User:
    if claims.role != Role.user:
        raise Forbidden("User access required")
    user = db.query(User).filter(User.id == claims.subject_id).first()
    if user is None:
        raise Unauthorized("Invalid token")
    return user
