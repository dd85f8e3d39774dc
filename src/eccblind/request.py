"""
Requester side of the protocol.

The requester blinds the signer's commitment R with secret factors a and b:

	R' = a * R + b * G
	c  = H(message, R') mod n
	e' = a^-1 * c mod n       (sent to the signer)

and unblinds the signer's answer s' = k + d * e':

	e = a * e' = c
	s = a * s' + b

so that s * G = R' + e * Q, which anyone can check with the public key Q.
The signer never sees R', c or the message, and (R, e', s') is independent of
(e, s) for uniformly drawn a and b.
"""

from logging import LoggerAdapter
from os import urandom
from threading import Lock
from typing import Optional, Union

from .crypto import Curve, DOMAIN, Point, RandomSource, modInv, randomScalar, toPoint, toScalar
from .errors import RandomSourceError, SessionReused
from .hashing import HashFn, challenge, defaultHash, toMessage
from .log import ceremonyLogger, fingerprint, timed
from .secret import Secret
from .signature import UnblindedSignature

RANDOM_MESSAGE_SIZE = 32

class BlindRequest:
	def __init__(self, a: Secret, b: Secret, blindedCommitment: Point, messageHash: int, blindedChallenge: int, message: bytes, logger: LoggerAdapter):
		self._a = a
		self._b = b
		self._lock = Lock()
		self._consumed = False
		self.blindedCommitment = blindedCommitment
		self.messageHash = messageHash
		self.blindedChallenge = blindedChallenge
		self.message = message
		self.curve = blindedCommitment.curve
		self.logger = logger

	@classmethod
	def new(cls, commitment: Union[Point, bytes], message: Optional[bytes] = None, hashFn: Optional[HashFn] = None,
			curve: Curve = DOMAIN, randomSource: Optional[RandomSource] = None,
			logger: Optional[LoggerAdapter] = None) -> tuple[int, 'BlindRequest']:
		"""
		Blinds the signer's commitment and derives the challenge for the given
		message. Without a message, a random one is drawn and kept on the
		request. Returns (e', request).
		"""
		logger = ceremonyLogger('request', logger)
		R = toPoint(commitment, curve)
		if message is None:
			message = randomMessage(randomSource)
		message = toMessage(message)
		h = defaultHash() if hashFn is None else hashFn

		with timed(logger, 'blinding'):
			while True:
				a = randomScalar(curve, randomSource)
				b = randomScalar(curve, randomSource, allowZero = True)
				# a is nonzero and n is prime, so a is always invertible
				aInv = modInv(a, curve.n)
				Rp = R.mul(a).add(curve.G.mul(b))
				c = challenge(message, Rp, h)
				if c != 0:
					break
				logger.debug('blinded challenge reduced to zero, redrawing blinding factors')

		ep = (aInv * c) % curve.n
		logger.info(f'blinded commitment {fingerprint(R.encode())} for a {len(message)} byte message')
		width = curve.scalarWidth
		request = cls(Secret(a, width), Secret(b, width), Rp, c, ep, message, logger)
		return ep, request

	@property
	def consumed(self) -> bool:
		return self._consumed

	def finalize(self, blindSignature: Union[int, bytes]) -> UnblindedSignature:
		sp = toScalar(blindSignature, self.curve, allowZero = True)

		with self._lock:
			if self._consumed:
				self.logger.critical('refusing to unblind twice with the same blinding factors')
				raise SessionReused('blind request has already been finalized')
			self._consumed = True

		n = self.curve.n
		try:
			with timed(self.logger, 'unblinding'):
				a = self._a._reveal()
				e = (a * self.blindedChallenge) % n
				s = (a * sp + self._b._reveal()) % n
		finally:
			self._a.wipe()
			self._b.wipe()

		self.logger.info('unblinded signature, request consumed')
		return UnblindedSignature(e, s, self.curve)

	def __repr__(self):
		state = 'consumed' if self._consumed else 'fresh'
		return f'BlindRequest({state}, blindedChallenge={self.blindedChallenge:#x})'

	def __copy__(self):
		raise TypeError('blind requests cannot be copied')

	def __deepcopy__(self, memo):
		raise TypeError('blind requests cannot be copied')

	def __reduce__(self):
		raise TypeError('blind requests cannot be serialized')

def randomMessage(randomSource: Optional[RandomSource] = None) -> bytes:
	source = urandom if randomSource is None else randomSource
	try:
		message = source(RANDOM_MESSAGE_SIZE)
	except (OSError, NotImplementedError) as exc:
		raise RandomSourceError('entropy source unavailable') from exc
	if len(message) != RANDOM_MESSAGE_SIZE:
		raise RandomSourceError('entropy source returned short output')
	return bytes(message)
