from .credential_verifier import CredentialVerifier

__all__ = ["CredentialVerifier"]
