import hashlib
from typing import Callable, Optional

from .config import settings
from .crypto import Curve, DOMAIN, Point

# (message, pointEncoding) -> digest
HashFn = Callable[[bytes, bytes], bytes]

def digestHash(name: str) -> HashFn:
	"""Builds a HashFn from a hashlib algorithm, digesting message || pointEncoding."""
	if name not in hashlib.algorithms_available:
		raise ValueError(f'unknown hash algorithm {name!r}')
	if hashlib.new(name).digest_size == 0:
		raise ValueError(f'{name!r} has no fixed digest size')

	def hashFn(message: bytes, pointEncoding: bytes) -> bytes:
		h = hashlib.new(name)
		h.update(message)
		h.update(pointEncoding)
		return h.digest()

	hashFn.__name__ = f'digestHash_{name}'
	return hashFn

def defaultHash() -> HashFn:
	return digestHash(settings.hashName)

def reduceDigest(digest: bytes, curve: Curve = DOMAIN) -> int:
	return int.from_bytes(digest, 'big') % curve.n

def toMessage(message: bytes) -> bytes:
	if not isinstance(message, (bytes, bytearray, memoryview)):
		raise TypeError(f'message must be bytes-like, not {type(message).__name__}')
	return bytes(message)

def challenge(message: bytes, point: Point, hashFn: Optional[HashFn] = None) -> int:
	h = defaultHash() if hashFn is None else hashFn
	return reduceDigest(h(toMessage(message), point.encode()), point.curve)
