# Standard library imports
import time
from typing import Any, Callable, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from ..domain.exceptions import BadRequestError


class PasswordHasher:
    """One-way salted password hashing backed by bcrypt."""
    
    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds
        self._dummy_hash: Optional[str] = None
    
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt
        
        Args:
            plain_password: The plain text password to hash
            
        Returns:
            Hashed password string (salt embedded)
            
        Raises:
            BadRequestError: If the password exceeds bcrypt's 72 byte input limit
        """
        encoded = plain_password.encode("utf-8")
        if len(encoded) > 72:
            raise BadRequestError("Password must be at most 72 bytes", "Invalid password")
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(encoded, salt)
        return hashed.decode("utf-8")
    
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password
        
        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against
            
        Returns:
            True if passwords match, False otherwise (including unparseable hashes
            and passwords longer than 72 bytes, which bcrypt 4.x would truncate)
        """
        encoded = plain_password.encode("utf-8")
        if len(encoded) > 72:
            return False
        try:
            return bcrypt.checkpw(
                encoded,
                hashed_password.encode("utf-8")
            )
        except Exception:
            return False
    
    @property
    def dummy_hash(self) -> str:
        """A throwaway hash with the configured work factor, used to equalize timing."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("dummy-password-for-timing")
        return self._dummy_hash


class TokenService:
    """
    Issues and validates signed bearer tokens (JWT, HMAC-SHA256 by default).
    
    Claims carried: ``sub`` (username), ``iat`` and ``exp`` (epoch seconds).
    Every failure collapses to ``None``/``False`` at this boundary.
    """
    
    def __init__(
        self,
        secret_key: str,
        ttl_seconds: int = 3600,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("Token TTL must be positive")
        self._secret_key = secret_key
        self.ttl_seconds = ttl_seconds
        self.algorithm = algorithm
        self._clock = clock
    
    def generate(self, subject: str) -> str:
        """
        Create a JWT token for ``subject`` with expiration
        
        Args:
            subject: Username the token is issued for
            
        Returns:
            Encoded JWT token string
        """
        issued_at = int(self._clock())
        token_payload: Dict[str, Any] = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + self.ttl_seconds,
        }
        return jwt.encode(token_payload, self._secret_key, algorithm=self.algorithm)
    
    def extract_subject(self, token: str) -> Optional[str]:
        """
        Read the ``sub`` claim without checking signature or freshness.
        
        Returns:
            The subject, or None for a malformed token
        """
        try:
            claims = jwt.decode(token, options={"verify_signature": False})
        except InvalidTokenError:
            return None
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        return subject
    
    def validate(self, token: str, expected_subject: str) -> bool:
        """
        Verify signature, expiry (``exp > now``) and subject.
        
        Args:
            token: The JWT token string
            expected_subject: Username the token must have been issued for
            
        Returns:
            True only if every check passes
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={
                    "require": ["sub", "iat", "exp"],
                    # freshness is checked against the injected clock below
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except InvalidTokenError:
            return False
        
        expires_at = claims.get("exp")
        issued_at = claims.get("iat")
        if not isinstance(expires_at, int) or not isinstance(issued_at, int):
            return False
        if expires_at <= issued_at or expires_at <= int(self._clock()):
            return False
        return claims.get("sub") == expected_subject
