from dataclasses import dataclass
from os import urandom
from typing import Callable, Optional, Union

from gmpy2 import invert

from .errors import InvalidPoint, InvalidScalar, RandomSourceError

RandomSource = Callable[[int], bytes]

@dataclass(frozen = True)
class Curve:
	"""Short Weierstrass curve y^2 = x^3 + ax + b over F_p with a prime order n generator."""
	name: str
	p: int
	a: int
	b: int
	gx: int
	gy: int
	n: int

	@property
	def G(self) -> 'Point':
		return Point(self.gx, self.gy, self)

	@property
	def infinity(self) -> 'Point':
		return Point(None, None, self)

	@property
	def scalarWidth(self) -> int:
		return (self.n.bit_length() + 7) // 8

	@property
	def fieldWidth(self) -> int:
		return (self.p.bit_length() + 7) // 8

P256 = Curve(
	name = 'P-256',
	p = 0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,
	a = 0xffffffff00000001000000000000000000000000fffffffffffffffffffffffc,
	b = 0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b,
	gx = 0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296,
	gy = 0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5,
	n = 0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
)

DOMAIN = P256

class Point:
	__slots__ = ('x', 'y', 'curve')

	def __init__(self, x: Optional[int], y: Optional[int], curve: Curve = DOMAIN):
		self.x = x
		self.y = y
		self.curve = curve

	def __str__(self):
		if self.isIdentity():
			return 'O'
		return f'({self.x}, {self.y})'

	def __repr__(self):
		return f'Point{self} on {self.curve.name}'

	def __eq__(self, other: object):
		if not isinstance(other, Point):
			return NotImplemented
		return self.curve == other.curve and self.x == other.x and self.y == other.y

	def __hash__(self):
		return hash((self.curve.name, self.x, self.y))

	def isOnCurve(self) -> bool:
		if self.isIdentity():
			return True
		c = self.curve
		return (self.y ** 2 - (self.x ** 3 + c.a * self.x + c.b)) % c.p == 0

	def isIdentity(self) -> bool:
		return self.x is None and self.y is None

	def neg(self) -> 'Point':
		if self.isIdentity():
			return self
		return Point(self.x, (-self.y) % self.curve.p, self.curve)

	def add(self, p2: 'Point') -> 'Point':
		if self.isIdentity():
			return p2
		if p2.isIdentity():
			return self

		p = self.curve.p
		if self.x == p2.x:
			if (self.y + p2.y) % p == 0:
				return self.curve.infinity
			slope = (3 * self.x ** 2 + self.curve.a) * int(invert(2 * self.y, p))
		else:
			slope = (p2.y - self.y) * int(invert((p2.x - self.x) % p, p))
		slope %= p

		x3 = (slope ** 2 - self.x - p2.x) % p
		y3 = (slope * (self.x - x3) - self.y) % p
		return Point(x3, y3, self.curve)

	def sub(self, p2: 'Point') -> 'Point':
		return self.add(p2.neg())

	def mul(self, scalar: int) -> 'Point':
		scalar %= self.curve.n
		base = self
		result = self.curve.infinity
		while scalar != 0:
			if scalar & 1 == 1:
				result = result.add(base)
			base = base.add(base)
			scalar >>= 1

		return result

	def encode(self) -> bytes:
		if self.isIdentity():
			return b'\x00'
		width = self.curve.fieldWidth
		return b'\x04' + self.x.to_bytes(width, 'big') + self.y.to_bytes(width, 'big')

	@classmethod
	def decode(cls, data: bytes, curve: Curve = DOMAIN) -> 'Point':
		"""Decodes an untrusted SEC1 point. The identity is rejected."""
		width = curve.fieldWidth
		if len(data) == 1 + 2 * width and data[0] == 4:
			x = int.from_bytes(data[1:1 + width], 'big')
			y = int.from_bytes(data[1 + width:], 'big')
			if x >= curve.p or y >= curve.p:
				raise InvalidPoint('point coordinate out of range')
		elif len(data) == 1 + width and data[0] in (2, 3):
			x = int.from_bytes(data[1:], 'big')
			if x >= curve.p:
				raise InvalidPoint('point coordinate out of range')
			y = liftX(x, data[0] & 1, curve)
		else:
			raise InvalidPoint(f'malformed point encoding of {len(data)} bytes')

		point = cls(x, y, curve)
		if not point.isOnCurve():
			raise InvalidPoint('point is not on curve')
		return point

def liftX(x: int, parity: int, curve: Curve) -> int:
	p = curve.p
	if p % 4 != 3:
		raise InvalidPoint(f'compressed points are not supported on {curve.name}')
	ySq = (pow(x, 3, p) + curve.a * x + curve.b) % p
	y = pow(ySq, (p + 1) // 4, p) # fails if sqrt doesn't exist
	if pow(y, 2, p) != ySq:
		raise InvalidPoint('point is not on curve')
	return y if y & 1 == parity else p - y

def toPoint(value: Union[Point, bytes], curve: Curve = DOMAIN) -> Point:
	if isinstance(value, Point):
		if value.curve != curve:
			raise InvalidPoint(f'point on {value.curve.name}, expected {curve.name}')
		if value.isIdentity() or not value.isOnCurve():
			raise InvalidPoint('point is not a valid group element')
		return value
	if isinstance(value, (bytes, bytearray, memoryview)):
		return Point.decode(bytes(value), curve)
	raise InvalidPoint(f'cannot interpret {type(value).__name__} as a point')

# Scalars

def modInv(x: int, n: int) -> int:
	try:
		return int(invert(x, n))
	except ZeroDivisionError:
		raise InvalidScalar(f'{x} is not invertible mod {n}')

def encodeScalar(value: int, curve: Curve = DOMAIN) -> bytes:
	return (value % curve.n).to_bytes(curve.scalarWidth, 'big')

def checkScalar(value: int, curve: Curve = DOMAIN, allowZero: bool = False) -> int:
	if value < 0 or value >= curve.n:
		raise InvalidScalar('scalar out of range')
	if value == 0 and not allowZero:
		raise InvalidScalar('scalar is zero')
	return value

def decodeScalar(data: bytes, curve: Curve = DOMAIN, allowZero: bool = False) -> int:
	if len(data) != curve.scalarWidth:
		raise InvalidScalar(f'scalar encoding is {len(data)} bytes, expected {curve.scalarWidth}')
	return checkScalar(int.from_bytes(data, 'big'), curve, allowZero)

def toScalar(value: Union[int, bytes], curve: Curve = DOMAIN, allowZero: bool = False) -> int:
	if isinstance(value, int) and not isinstance(value, bool):
		return checkScalar(value, curve, allowZero)
	if isinstance(value, (bytes, bytearray, memoryview)):
		return decodeScalar(bytes(value), curve, allowZero)
	raise InvalidScalar(f'cannot interpret {type(value).__name__} as a scalar')

def randomScalar(curve: Curve = DOMAIN, randomSource: Optional[RandomSource] = None, allowZero: bool = False) -> int:
	"""
	Draws a uniform scalar in [1, n) (or [0, n) with allowZero) by rejection
	sampling over full-width draws masked to the bit length of n.
	"""
	source = urandom if randomSource is None else randomSource
	width = curve.scalarWidth
	mask = (1 << curve.n.bit_length()) - 1
	while True:
		try:
			raw = source(width)
		except (OSError, NotImplementedError) as exc:
			raise RandomSourceError('entropy source unavailable') from exc
		if not isinstance(raw, (bytes, bytearray)) or len(raw) != width:
			raise RandomSourceError(f'entropy source returned short output ({width} bytes requested)')

		candidate = int.from_bytes(raw, 'big') & mask
		if candidate < curve.n and (candidate != 0 or allowZero):
			return candidate
