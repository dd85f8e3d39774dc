"""
Blind Schnorr-style signatures over an elliptic curve.

The signer opens a BlindSession and sends its commitment R. The requester
builds a BlindRequest from R and the message and sends back the blinded
challenge e'. The signer answers with s' = session.sign(e', keypair), and the
requester turns it into an UnblindedSignature with request.finalize(s').
Anyone holding the signer's public key can then authenticate the signature
against the message.

Transport is left to the caller: points travel as Point.encode() bytes,
scalars as encodeScalar() bytes and signatures as toWire() bytes.
"""

from .crypto import Curve, DOMAIN, P256, Point, decodeScalar, encodeScalar
from .errors import (
	BlindSignatureError,
	InvalidPoint,
	InvalidScalar,
	RandomSourceError,
	SessionReused,
	WireDecodeError,
)
from .hashing import HashFn, defaultHash, digestHash
from .keypair import KeyPair
from .request import BlindRequest
from .secret import Secret
from .session import BlindSession
from .signature import UnblindedSignature, WireUnblindedSignature

__version__ = '0.1.0'

__all__ = [
	'BlindRequest',
	'BlindSession',
	'BlindSignatureError',
	'Curve',
	'DOMAIN',
	'HashFn',
	'InvalidPoint',
	'InvalidScalar',
	'KeyPair',
	'P256',
	'Point',
	'RandomSourceError',
	'Secret',
	'SessionReused',
	'UnblindedSignature',
	'WireDecodeError',
	'WireUnblindedSignature',
	'decodeScalar',
	'defaultHash',
	'digestHash',
	'encodeScalar',
]
