"""Threshold secret reconstruction from radix-encoded Shamir shares"""

from .bigint import BigInt, LIMB_BASE
from .commitment import create_commitment, verify_commitment
from .errors import (
    ArithmeticInconsistency,
    DegenerateShareSet,
    InconsistentShares,
    InsufficientShares,
    InvalidArgument,
    InvalidDigit,
    MalformedShareDocument,
    ShareRecoveryError,
)
from .interpolation import InterpolationTerm, Point, interpolate_at, reconstruct
from .radix import decode, encode
from .shares import (
    RawShare,
    ShareSet,
    load_share_file,
    parse_share_document,
    share_set_from_dict,
)

__all__ = [
    "BigInt",
    "LIMB_BASE",
    "create_commitment",
    "verify_commitment",
    "ArithmeticInconsistency",
    "DegenerateShareSet",
    "InconsistentShares",
    "InsufficientShares",
    "InvalidArgument",
    "InvalidDigit",
    "MalformedShareDocument",
    "ShareRecoveryError",
    "InterpolationTerm",
    "Point",
    "interpolate_at",
    "reconstruct",
    "decode",
    "encode",
    "RawShare",
    "ShareSet",
    "load_share_file",
    "parse_share_document",
    "share_set_from_dict",
]
