"""
Zero Waste Chef Authentication Service
JWT issuance/verification, role gating and credential flows
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from core.config import Settings
from models.users import User, UserRole
from schemas.auth_schemas import UserCreate, IdentityContext
from services.exceptions import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    MissingTokenError,
    InvalidTokenError,
    ForbiddenRoleError,
    NotFoundError,
)

logger = structlog.get_logger()

ACCESS_TOKEN = "access"
RESET_TOKEN = "reset"


class TokenService:
    """
    Issues and verifies signed, time-limited bearer tokens.

    Tokens are stateless: validity depends only on signature, expiry and
    token type. The role is deliberately not part of the payload;
    ``authorize_admin`` reads it from storage on every call.
    """

    def __init__(self, settings: Settings):
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.access_token_ttl = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
        self.reset_token_ttl = timedelta(minutes=settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES)

    def _encode(
        self,
        claims: Dict[str, Any],
        token_type: str,
        ttl: timedelta,
        issued_at: Optional[datetime] = None
    ) -> str:
        now = issued_at or datetime.now(timezone.utc)
        to_encode = dict(claims)
        to_encode.update({
            "exp": now + ttl,
            "iat": now,
            "type": token_type
        })
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def issue(
        self,
        identity_id: int,
        username: str,
        ttl: Optional[timedelta] = None,
        issued_at: Optional[datetime] = None
    ) -> str:
        """Create a session token for an identity"""
        return self._encode(
            {"sub": str(identity_id), "username": username},
            ACCESS_TOKEN,
            self.access_token_ttl if ttl is None else ttl,
            issued_at,
        )

    def issue_reset_token(
        self,
        identity_id: int,
        ttl: Optional[timedelta] = None,
        issued_at: Optional[datetime] = None
    ) -> str:
        """Create a password-reset token carrying only the identity id"""
        return self._encode(
            {"sub": str(identity_id)},
            RESET_TOKEN,
            self.reset_token_ttl if ttl is None else ttl,
            issued_at,
        )

    def verify(self, token: str, token_type: str = ACCESS_TOKEN) -> IdentityContext:
        """Verify and decode a token; every failure mode maps to InvalidTokenError"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])

            if payload.get("type") != token_type:
                raise JWTError("Invalid token type")

            return IdentityContext(id=int(payload["sub"]), username=payload.get("username"))

        except (JWTError, KeyError, TypeError, ValueError) as e:
            logger.debug("Token verification failed", error=str(e), token_type=token_type)
            raise InvalidTokenError("Invalid token")

    def authenticate_request(self, header_value: Optional[str]) -> IdentityContext:
        """Resolve the identity behind an ``Authorization: Bearer <token>`` header"""
        if not header_value:
            raise MissingTokenError("No token provided")

        parts = header_value.split()
        if len(parts) < 2 or not parts[1]:
            raise MissingTokenError("No token provided")
        if parts[0].lower() != "bearer" or len(parts) > 2:
            raise InvalidTokenError("Invalid token")

        return self.verify(parts[1])

    async def authorize_admin(self, identity: IdentityContext, db: AsyncSession) -> User:
        """Re-read the stored role; only administrators pass"""
        user = await db.get(User, identity.id)
        if user is None or user.role != UserRole.ADMINISTRATOR:
            logger.warning("Admin access denied", user_id=identity.id)
            raise ForbiddenRoleError("Admin access required")
        return user


class AuthService:
    """Registration, login and password reset over the users table"""

    def __init__(self, settings: Settings, token_service: TokenService):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.BCRYPT_ROUNDS
        )
        self.tokens = token_service

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash"""
        return self.pwd_context.verify(plain_password, hashed_password)

    def get_password_hash(self, password: str) -> str:
        """Hash a password"""
        return self.pwd_context.hash(password)

    async def register(self, user_data: UserCreate, db: AsyncSession) -> str:
        """Create a standard account and return its first session token"""
        existing_user = await db.scalar(
            select(User).where(
                or_(User.username == user_data.username, User.email == user_data.email)
            )
        )
        if existing_user:
            raise DuplicateIdentityError("Username or email already exists")

        user = User(
            username=user_data.username,
            email=user_data.email,
            password_hash=self.get_password_hash(user_data.password),
            name=user_data.name,
            family_name=user_data.family_name,
            phone_number=user_data.phone_number,
            profession=user_data.profession,
            age=user_data.age,
            role=UserRole.STANDARD,
        )
        db.add(user)

        try:
            await db.commit()
        except IntegrityError:
            # A concurrent registration won the unique constraint
            await db.rollback()
            raise DuplicateIdentityError("Username or email already exists")

        logger.info("User registered", user_id=user.id, username=user.username)
        return self.tokens.issue(user.id, user.username)

    async def login(self, username_or_email: str, password: str, db: AsyncSession) -> str:
        """Check credentials by username or email and issue a session token"""
        user = await db.scalar(
            select(User).where(
                or_(User.username == username_or_email, User.email == username_or_email)
            )
        )

        if not user or not self.verify_password(password, user.password_hash):
            raise InvalidCredentialsError("Invalid credentials")

        logger.info("User logged in", user_id=user.id)
        return self.tokens.issue(user.id, user.username)

    async def request_password_reset(self, email: str, db: AsyncSession) -> str:
        """Generate a reset token; there is no mail transport, so it is returned to the caller"""
        user = await db.scalar(select(User).where(User.email == email))
        if not user:
            raise NotFoundError("User not found")

        logger.info("Password reset requested", user_id=user.id)
        return self.tokens.issue_reset_token(user.id)

    async def reset_password(self, token: str, new_password: str, db: AsyncSession) -> None:
        """Replace the password hash of the identity named by a reset token"""
        identity = self.tokens.verify(token, RESET_TOKEN)

        user = await db.get(User, identity.id)
        if not user:
            raise InvalidTokenError("Invalid or expired token")

        user.password_hash = self.get_password_hash(new_password)
        await db.commit()
        logger.info("Password reset completed", user_id=user.id)

    async def check_duplicates(
        self,
        username: Optional[str],
        email: Optional[str],
        db: AsyncSession
    ) -> Dict[str, bool]:
        """Report which of username/email are already taken"""
        username_taken = False
        email_taken = False
        if username:
            username_taken = await db.scalar(select(User.id).where(User.username == username)) is not None
        if email:
            email_taken = await db.scalar(select(User.id).where(User.email == email)) is not None
        return {"username_exists": username_taken, "email_exists": email_taken}
