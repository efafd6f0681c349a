from typing import Dict, Optional
import logging

import httpx
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

from app.core.config import Settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class Auth0:
    """
    Verificador de tokens del proveedor de autenticación.

    El back office solo necesita saber si hay un usuario autenticado: valida
    firma, audience, issuer y expiración del JWT contra el JWKS del proveedor.
    """

    def __init__(self, domain: str, audience: str, issuer: str, algorithms):
        self.domain = domain
        self.audience = audience
        self.issuer = issuer
        self.algorithms = algorithms
        self.jwks: Optional[Dict] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Auth0":
        return cls(
            domain=settings.AUTH0_DOMAIN,
            audience=settings.AUTH0_API_AUDIENCE,
            issuer=settings.AUTH0_ISSUER,
            algorithms=settings.AUTH0_ALGORITHMS,
        )

    async def get_jwks(self) -> Dict:
        if self.jwks is None:
            async with httpx.AsyncClient(timeout=10) as client:
                response = await client.get(f"https://{self.domain}/.well-known/jwks.json")
                response.raise_for_status()
                self.jwks = response.json()
        return self.jwks

    async def verify_token(self, token: str) -> Dict:
        try:
            unverified_header = jwt.get_unverified_header(token)
        except JWTError:
            raise _unauthorized("Credenciales de autenticación inválidas")

        jwks = await self.get_jwks()
        rsa_key = {}
        for key in jwks.get("keys", []):
            if key.get("kid") == unverified_header.get("kid"):
                rsa_key = {
                    "kty": key["kty"],
                    "kid": key["kid"],
                    "use": key["use"],
                    "n": key["n"],
                    "e": key["e"],
                }

        if not rsa_key:
            raise _unauthorized("Credenciales de autenticación inválidas")

        try:
            return jwt.decode(
                token,
                rsa_key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
            )
        except jwt.ExpiredSignatureError:
            raise _unauthorized("El token ha expirado")
        except jwt.JWTClaimsError:
            raise _unauthorized("Claims incorrectos: verifica audience y issuer")
        except JWTError:
            raise _unauthorized("No se pudieron validar las credenciales")


def get_auth(request: Request) -> Auth0:
    verifier: Optional[Auth0] = getattr(request.app.state, "auth", None)
    if verifier is None:
        raise RuntimeError("Verificador de autenticación no inicializado")
    return verifier


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: Auth0 = Depends(get_auth),
) -> Dict:
    """
    Verifica y decodifica el token JWT para obtener el usuario actual.
    """
    if credentials is None:
        raise _unauthorized("No autenticado")
    payload = await verifier.verify_token(credentials.credentials)
    logger.debug(f"Usuario autenticado: {payload.get('sub')}")
    return payload
