from typing import Optional

from .crypto import Curve, DOMAIN, Point, RandomSource, decodeScalar, encodeScalar, randomScalar, toPoint
from .errors import InvalidPoint
from .log import fingerprint, logger
from .secret import Secret

class KeyPair:
	"""
	The signer's key pair. The private scalar d signs blinded challenges; the
	public point Q = d * G authenticates unblinded signatures. One key pair
	serves any number of ceremonies.
	"""

	__slots__ = ('_private', '_public', 'curve')

	def __init__(self, private: Secret, public: Point, curve: Curve = DOMAIN):
		self._private = private
		self._public = public
		self.curve = curve

	@classmethod
	def generate(cls, curve: Curve = DOMAIN, randomSource: Optional[RandomSource] = None) -> 'KeyPair':
		d = randomScalar(curve, randomSource)
		return cls(Secret(d, curve.scalarWidth), curve.G.mul(d), curve)

	@classmethod
	def fromWired(cls, private: bytes, public: Optional[bytes] = None, curve: Curve = DOMAIN) -> 'KeyPair':
		d = decodeScalar(bytes(private), curve)
		Q = curve.G.mul(d)
		if public is not None and toPoint(public, curve) != Q:
			raise InvalidPoint('public key does not match private key')
		return cls(Secret(d, curve.scalarWidth), Q, curve)

	@property
	def private(self) -> Secret:
		return self._private

	@property
	def public(self) -> Point:
		return self._public

	def publicWired(self) -> bytes:
		return self._public.encode()

	def exportPrivate(self) -> bytes:
		logger.warning(f'private key exported for public key {fingerprint(self._public.encode())}')
		return encodeScalar(self._private._reveal(), self.curve)

	def wipe(self) -> None:
		self._private.wipe()

	def __repr__(self):
		return f'KeyPair(public={self._public!r}, private={self._private!r})'

	def __copy__(self):
		raise TypeError('key pairs cannot be copied, use exportPrivate()')

	def __deepcopy__(self, memo):
		raise TypeError('key pairs cannot be copied, use exportPrivate()')

	def __reduce__(self):
		raise TypeError('key pairs cannot be serialized, use exportPrivate()')
