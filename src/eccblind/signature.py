from dataclasses import dataclass, field
from hmac import compare_digest
from typing import Optional, Union

from .crypto import Curve, DOMAIN, Point, encodeScalar, toPoint
from .errors import WireDecodeError
from .hashing import HashFn, challenge, toMessage

@dataclass(frozen = True)
class UnblindedSignature:
	"""
	The final signature (e, s) on a message. It carries no secret material and
	is safe to store and transmit. The message itself is not included; it is
	bound through e = H(message, s * G - e * Q).
	"""
	e: int
	s: int
	curve: Curve = field(default = DOMAIN, repr = False)

	def authenticate(self, publicKey: Union[Point, bytes], message: bytes, hashFn: Optional[HashFn] = None) -> bool:
		"""
		True iff this signature was produced on message by the holder of the
		private key behind publicKey. A mismatch is False, never an exception;
		only malformed input raises: InvalidPoint for the public key, TypeError
		for a message that is not bytes-like.
		"""
		message = toMessage(message)
		Q = toPoint(publicKey, self.curve)
		n = self.curve.n
		if not (0 <= self.e < n and 0 <= self.s < n):
			return False

		# R'' = s * G - e * Q, which is R' for an honest ceremony
		Rpp = self.curve.G.mul(self.s).sub(Q.mul(self.e))
		expected = challenge(message, Rpp, hashFn)
		return compare_digest(encodeScalar(expected, self.curve), encodeScalar(self.e, self.curve))

	def toWire(self) -> bytes:
		return encodeScalar(self.e, self.curve) + encodeScalar(self.s, self.curve)

	@classmethod
	def fromWire(cls, data: bytes, curve: Curve = DOMAIN) -> 'UnblindedSignature':
		width = curve.scalarWidth
		if len(data) != 2 * width:
			raise WireDecodeError(f'signature is {len(data)} bytes, expected {2 * width}')
		e = int.from_bytes(data[:width], 'big')
		s = int.from_bytes(data[width:], 'big')
		if e >= curve.n or s >= curve.n:
			raise WireDecodeError('signature scalar out of range')
		return cls(e, s, curve)

	def __bytes__(self):
		return self.toWire()

@dataclass(frozen = True)
class WireUnblindedSignature:
	"""The wired form e || S of an UnblindedSignature, each scalar fixed-width big-endian."""
	data: bytes

	@classmethod
	def fromSignature(cls, signature: UnblindedSignature) -> 'WireUnblindedSignature':
		return cls(signature.toWire())

	def toSignature(self, curve: Curve = DOMAIN) -> UnblindedSignature:
		return UnblindedSignature.fromWire(self.data, curve)

	def __bytes__(self):
		return bytes(self.data)

	def __len__(self):
		return len(self.data)
