from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend


def create_commitment(secret) -> str:
    """SHA-256 commitment over the decimal rendering of a secret"""
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(str(secret).encode("utf-8"))
    return digest.finalize().hex()


def verify_commitment(secret, commitment: str) -> bool:
    return create_commitment(secret) == commitment.lower()
