"""
Signer side of the protocol.

A BlindSession is opened per signing ceremony. Its commitment R = k * G is
sent to the requester, and the blinded challenge e' that comes back is signed
exactly once. Signing twice with the same nonce k over two different
challenges discloses the private key, so a consumed session refuses to sign
again.
"""

from logging import LoggerAdapter
from threading import Lock
from typing import Optional, Union

from .crypto import Curve, DOMAIN, Point, RandomSource, checkScalar, randomScalar, toScalar
from .errors import InvalidScalar, SessionReused
from .keypair import KeyPair
from .log import ceremonyLogger, fingerprint, timed
from .secret import Secret

PrivateKey = Union[KeyPair, Secret, int]

def privateScalar(privateKey: PrivateKey, curve: Curve) -> int:
	if isinstance(privateKey, KeyPair):
		if privateKey.curve != curve:
			raise InvalidScalar(f'key pair is on {privateKey.curve.name}, expected {curve.name}')
		privateKey = privateKey.private
	if isinstance(privateKey, Secret):
		if privateKey.wiped:
			raise InvalidScalar('private key has been wiped')
		privateKey = privateKey._reveal()
	if not isinstance(privateKey, int) or isinstance(privateKey, bool):
		raise InvalidScalar(f'cannot interpret {type(privateKey).__name__} as a private key')
	return checkScalar(privateKey, curve)

class BlindSession:
	def __init__(self, k: Secret, commitment: Point, logger: LoggerAdapter):
		self._k = k
		self._lock = Lock()
		self._consumed = False
		self.commitment = commitment
		self.curve = commitment.curve
		self.logger = logger

	@classmethod
	def new(cls, curve: Curve = DOMAIN, randomSource: Optional[RandomSource] = None, logger: Optional[LoggerAdapter] = None) -> tuple[Point, 'BlindSession']:
		logger = ceremonyLogger('session', logger)
		with timed(logger, 'commitment'):
			k = randomScalar(curve, randomSource)
			R = curve.G.mul(k)
		logger.info(f'opened session with commitment {fingerprint(R.encode())}')
		return R, cls(Secret(k, curve.scalarWidth), R, logger)

	@property
	def consumed(self) -> bool:
		return self._consumed

	def sign(self, blindedChallenge: Union[int, bytes], privateKey: PrivateKey) -> int:
		"""
		Computes the blind signature s' = k + d * e' mod n and consumes the
		session. Invalid input leaves the session fresh.
		"""
		ep = toScalar(blindedChallenge, self.curve)
		d = privateScalar(privateKey, self.curve)

		with self._lock:
			if self._consumed:
				self.logger.critical('refusing to sign twice with the same nonce')
				raise SessionReused('blind session has already signed a challenge')
			self._consumed = True

		try:
			with timed(self.logger, 'blind signature'):
				sp = (self._k._reveal() + d * ep) % self.curve.n
		finally:
			self._k.wipe()

		self.logger.info('signed blinded challenge, session consumed')
		return sp

	def __repr__(self):
		state = 'consumed' if self._consumed else 'fresh'
		return f'BlindSession({state}, commitment={fingerprint(self.commitment.encode())})'

	def __copy__(self):
		raise TypeError('blind sessions cannot be copied')

	def __deepcopy__(self, memo):
		raise TypeError('blind sessions cannot be copied')

	def __reduce__(self):
		raise TypeError('blind sessions cannot be serialized')
